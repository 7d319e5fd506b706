from django.core.exceptions import ValidationError
from django.test import SimpleTestCase

from apps.core.validators import (
    MAX_UPLOAD_SIZE,
    is_valid_tags,
    parse_tags,
    PASSWORD_SYMBOLS,
    password_meter_config,
    password_strength,
    password_strength_display,
    password_strength_label,
    tag_errors,
    validate_upload_size,
    validate_upload_type,
)


class PasswordStrengthTests(SimpleTestCase):
    def test_short_lowercase_password_scores_zero(self):
        self.assertEqual(password_strength("abc"), 0)

    def test_length_thresholds(self):
        self.assertEqual(password_strength("abcdefg"), 0)
        self.assertEqual(password_strength("abcdefgh"), 25)
        self.assertEqual(password_strength("abcdefghijkl"), 50)

    def test_score_never_decreases_as_password_grows(self):
        scores = [password_strength("a" * n) for n in range(0, 16)]
        self.assertEqual(scores, sorted(scores))

    def test_full_marks_capped_at_100(self):
        self.assertEqual(password_strength("Abcdefghijk1!"), 100)
        self.assertEqual(password_strength("Abcdefghijk1!xyz$%"), 100)

    def test_digit_and_symbol_add_half_steps(self):
        self.assertEqual(password_strength("abcdefg1"), 37.5)
        self.assertEqual(password_strength("abcdefg1!"), 50)

    def test_labels(self):
        self.assertEqual(password_strength_label(password_strength("abc")), "Weak")
        self.assertEqual(password_strength_label(50), "Medium")
        self.assertEqual(password_strength_label(password_strength("Abcdefgh1!")), "Strong")

    def test_display_matches_label(self):
        display = password_strength_display("abcdefg1!")
        self.assertEqual(display["score"], 50)
        self.assertEqual(str(display["label"]), "Medium")
        self.assertEqual(display["tone"], "warning")

    def test_meter_config_describes_the_same_rules(self):
        config = password_meter_config()
        self.assertEqual(config["symbols"], PASSWORD_SYMBOLS)
        self.assertEqual(config["lengthSteps"], [8, 12])
        self.assertEqual(sum(config["points"].values()) + config["points"]["length"], 100)
        self.assertEqual([b["below"] for b in config["bands"]], [50, 75, None])
        self.assertEqual([b["label"] for b in config["bands"]], ["Weak", "Medium", "Strong"])


class TagValidationTests(SimpleTestCase):
    def test_empty_string_is_valid(self):
        self.assertTrue(is_valid_tags(""))
        self.assertEqual(parse_tags(""), [])

    def test_tags_are_trimmed_and_empties_dropped(self):
        self.assertEqual(parse_tags(" notes , , midterm,week-3 "), ["notes", "midterm", "week-3"])

    def test_allowed_characters(self):
        self.assertTrue(is_valid_tags("lab report, week_2, CS-101"))
        self.assertFalse(is_valid_tags("notes, exam!"))

    def test_too_many_tags(self):
        self.assertTrue(is_valid_tags(",".join(f"t{i}" for i in range(20))))
        self.assertFalse(is_valid_tags(",".join(f"t{i}" for i in range(21))))

    def test_tag_too_long(self):
        self.assertTrue(is_valid_tags("a" * 50))
        self.assertFalse(is_valid_tags("a" * 51))

    def test_raw_string_too_long(self):
        errors = tag_errors("a," * 251)
        self.assertEqual(len(errors), 1)


class UploadValidationTests(SimpleTestCase):
    def test_size_boundary(self):
        validate_upload_size(MAX_UPLOAD_SIZE)
        with self.assertRaises(ValidationError):
            validate_upload_size(MAX_UPLOAD_SIZE + 1)

    def test_allowed_types(self):
        for name in ("notes.pdf", "slides.PPTX", "photo.jpeg", "readme.txt"):
            validate_upload_type(name)

    def test_rejected_types(self):
        for name in ("script.exe", "archive.zip", "noextension"):
            with self.assertRaises(ValidationError):
                validate_upload_type(name)
