from django.contrib.auth import authenticate, get_user_model
from django.test import Client, TestCase
from django.urls import reverse

from users.backends import EmailBackend

User = get_user_model()


class AuthTests(TestCase):
    def setUp(self) -> None:
        self.client = Client()
        self.password = "correct-horse-battery-staple"
        self.user = User.objects.create_user(email="testuser@example.com", password=self.password)
        self.login_url = reverse("login")
        self.logout_url = reverse("logout")
        self.profile_url = reverse("users:profile")

    def test_login_required_for_profile(self) -> None:
        """Test that the profile page requires login."""
        response = self.client.get(self.profile_url)
        self.assertRedirects(response, f"{self.login_url}?next={self.profile_url}")

    def test_login_view(self) -> None:
        """Test that login page renders an email field."""
        response = self.client.get(self.login_url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "registration/login.html")
        self.assertContains(response, 'type="email"')

    def test_successful_login(self) -> None:
        """Test valid email login redirects to the profile."""
        response = self.client.post(
            self.login_url, {"username": "testuser@example.com", "password": self.password}
        )
        self.assertRedirects(response, self.profile_url)

        response = self.client.get(self.profile_url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Welcome, testuser@example.com")

    def test_login_with_uppercase_domain(self) -> None:
        response = self.client.post(
            self.login_url, {"username": "testuser@EXAMPLE.COM", "password": self.password}
        )
        self.assertRedirects(response, self.profile_url)

    def test_login_wrong_password(self) -> None:
        response = self.client.post(
            self.login_url, {"username": "testuser@example.com", "password": "wrong-password"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Please enter a correct email and password")
        self.assertNotIn("_auth_user_id", self.client.session)

    def test_login_rejects_non_email_identifier(self) -> None:
        response = self.client.post(
            self.login_url, {"username": "testuser", "password": self.password}
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context["form"].errors["username"])

    def test_inactive_user_cannot_login(self) -> None:
        self.user.is_active = False
        self.user.save()

        self.assertFalse(self.client.login(email="testuser@example.com", password=self.password))

    def test_logout(self) -> None:
        """Test logout functionality."""
        self.client.login(email="testuser@example.com", password=self.password)

        response = self.client.post(self.logout_url)
        self.assertRedirects(response, self.login_url)

        response = self.client.get(self.profile_url)
        self.assertRedirects(response, f"{self.login_url}?next={self.profile_url}")


class EmailBackendTests(TestCase):
    def setUp(self) -> None:
        self.backend = EmailBackend()
        self.password = "correct-horse-battery-staple"
        self.user = User.objects.create_user(email="Person@example.com", password=self.password)

    def test_authenticates_by_email(self) -> None:
        user = self.backend.authenticate(
            None, username="Person@example.com", password=self.password
        )
        self.assertEqual(user, self.user)

    def test_authenticates_with_email_keyword(self) -> None:
        user = self.backend.authenticate(None, email="Person@example.com", password=self.password)
        self.assertEqual(user, self.user)

    def test_domain_case_is_ignored(self) -> None:
        user = self.backend.authenticate(
            None, username="Person@EXAMPLE.com", password=self.password
        )
        self.assertEqual(user, self.user)

    def test_local_part_case_is_significant(self) -> None:
        user = self.backend.authenticate(
            None, username="person@example.com", password=self.password
        )
        self.assertIsNone(user)

    def test_unknown_email(self) -> None:
        self.assertIsNone(
            self.backend.authenticate(None, username="nobody@example.com", password=self.password)
        )

    def test_missing_credentials(self) -> None:
        self.assertIsNone(self.backend.authenticate(None, username=None, password=self.password))
        self.assertIsNone(
            self.backend.authenticate(None, username="Person@example.com", password=None)
        )

    def test_configured_in_settings(self) -> None:
        user = authenticate(username="Person@example.com", password=self.password)
        self.assertEqual(user, self.user)
        self.assertEqual(user.backend, "users.backends.EmailBackend")
