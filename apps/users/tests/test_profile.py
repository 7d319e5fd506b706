from django.contrib.auth import get_user_model
from django.test import Client, TestCase
from django.urls import reverse

from apps.users.models import Profile
from apps.users.sessions import device_type, sign_out_everywhere, user_sessions

User = get_user_model()


class DeviceTypeTests(TestCase):
    def test_device_types(self):
        ipad = "Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X) AppleWebKit/605.1.15"
        iphone = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile/15E148"
        android_tablet = "Mozilla/5.0 (Linux; Android 13; SM-X700) AppleWebKit/537.36"
        android_phone = "Mozilla/5.0 (Linux; Android 13; Pixel 7) AppleWebKit/537.36 Mobile Safari/537.36"
        desktop = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 Chrome/120.0"

        self.assertEqual(device_type(ipad), "Tablet")
        self.assertEqual(device_type(android_tablet), "Tablet")
        self.assertEqual(device_type(iphone), "Mobile")
        self.assertEqual(device_type(android_phone), "Mobile")
        self.assertEqual(device_type(desktop), "Desktop")
        self.assertEqual(device_type(None), "Desktop")


class SessionTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="sessions@example.com", password="secret123")
        self.other = User.objects.create_user(email="bystander@example.com", password="secret123")
        self.laptop = Client()
        self.phone = Client()
        self.bystander = Client()
        self.laptop.force_login(self.user)
        self.phone.force_login(self.user)
        self.bystander.force_login(self.other)

    def test_sign_out_everywhere(self):
        self.assertEqual(len(user_sessions(self.user)), 2)
        self.assertEqual(sign_out_everywhere(self.user), 2)
        self.assertEqual(user_sessions(self.user), [])
        self.assertEqual(len(user_sessions(self.other)), 1)

    def test_view_ends_every_session(self):
        response = self.laptop.post(reverse("sign_out_all_devices"))
        self.assertRedirects(response, reverse("account_login"), fetch_redirect_response=False)

        self.assertEqual(self.phone.get(reverse("settings")).status_code, 302)
        self.assertEqual(self.laptop.get(reverse("settings")).status_code, 302)
        self.assertEqual(self.bystander.get(reverse("settings")).status_code, 200)


class ProfileViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="profile@example.com", password="secret123")
        self.client.force_login(self.user)

    def test_profile_created_with_user(self):
        self.assertTrue(Profile.objects.filter(user=self.user).exists())

    def test_incomplete_profile_warning(self):
        response = self.client.get(reverse("users_profile"))
        self.assertEqual(response.status_code, 200)
        messages = [str(m) for m in response.context["messages"]]
        self.assertIn("Add your name in Settings to complete your profile.", messages)

    def test_edit(self):
        response = self.client.post(reverse("users_profile_edit"), {
            "full_name": "  Grace Hopper ",
            "student_id": "S1234567",
            "phone": "",
            "program": "BSc",
            "major": "Mathematics",
            "year_of_study": 2,
        })
        self.assertRedirects(response, reverse("users_profile"), fetch_redirect_response=False)
        profile = Profile.objects.get(user=self.user)
        self.assertEqual(profile.full_name, "Grace Hopper")
        self.assertEqual(profile.year_of_study, 2)

    def test_edit_rejects_short_name(self):
        response = self.client.post(reverse("users_profile_edit"), {"full_name": "G"})
        self.assertEqual(response.status_code, 200)
        self.assertIn("Name must be at least 2 characters", response.context["form"].errors["full_name"])

    def test_settings_page(self):
        response = self.client.get(reverse("settings"), HTTP_USER_AGENT="Mozilla/5.0 (iPhone) Mobile")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["session_info"]["device"], "Mobile")
        for name in ("profile_form", "preferences_form", "theme_form"):
            self.assertIn(name, response.context)
