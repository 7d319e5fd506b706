from django.contrib.auth.base_user import BaseUserManager
from django.utils.translation import gettext_lazy as _


class StudentUserManager(BaseUserManager):
    """
    Students sign in with their email address. Addresses are stored
    lower-cased so "Ada@Uni.edu" and "ada@uni.edu" are the same account.
    """
    use_in_migrations = True

    @classmethod
    def normalize_email(cls, email):
        return super().normalize_email(email or "").strip().lower()

    def get_by_natural_key(self, username):
        return self.get(**{f"{self.model.USERNAME_FIELD}__iexact": (username or "").strip()})

    def create_user(self, email, password=None, **extra_fields):
        """Accounts created without a password cannot sign in until one is set."""
        email = self.normalize_email(email)
        if not email:
            raise ValueError(_("An email address is required"))

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if not (extra_fields["is_staff"] and extra_fields["is_superuser"]):
            raise ValueError(_("Superusers need is_staff and is_superuser set."))
        return self.create_user(email, password, **extra_fields)
