from datetime import date
from types import SimpleNamespace

from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.models import User
from accounts.permissions import IsAdminOrSelf
from profiles.models import ConsultantProfile
from projects.models import Project


class IsAdminOrSelfTests(SimpleTestCase):

    def setUp(self) -> None:
        self.permission = IsAdminOrSelf()
        self.owner = User(id=1, username='ana')
        self.other = User(id=2, username='ben')

    def check(self, user, obj):
        return self.permission.has_object_permission(SimpleNamespace(user=user), None, obj)

    def test_self_access(self) -> None:
        self.assertTrue(self.check(self.owner, self.owner))
        self.assertTrue(self.check(self.owner, SimpleNamespace(user=self.owner)))

    def test_other_user_denied(self) -> None:
        self.assertFalse(self.check(self.other, self.owner))
        self.assertFalse(self.check(self.other, SimpleNamespace(user=self.owner)))

    def test_admin_role_allowed(self) -> None:
        admin = User(id=3, username='boss', role=User.ADMIN)
        self.assertTrue(self.check(admin, SimpleNamespace(user=self.owner)))


class SignupViewTests(TestCase):

    def test_signup_creates_user_and_profile(self) -> None:
        response = self.client.post(
            reverse('signup'),
            {
                'username': 'alopez',
                'first_name': 'Ana',
                'last_name': 'Lopez',
                'email': 'Ana@Example.com',
                'job_title': 'Consultant',
                'password1': 'Tr1cky-Passphrase',
                'password2': 'Tr1cky-Passphrase',
            },
        )

        self.assertRedirects(response, reverse('login'))
        user = User.objects.get(username='alopez')
        self.assertEqual(user.email, 'ana@example.com')
        self.assertEqual(user.role, User.CONSULTANT)
        self.assertEqual(user.profile.display_name, 'Ana Lopez')
        self.assertEqual(user.profile.job_title, 'Consultant')

    def test_duplicate_email_rejected(self) -> None:
        User.objects.create_user(username='existing', email='ana@example.com', password='x')

        response = self.client.post(
            reverse('signup'),
            {
                'username': 'alopez',
                'first_name': 'Ana',
                'last_name': 'Lopez',
                'email': 'ANA@example.com',
                'password1': 'Tr1cky-Passphrase',
                'password2': 'Tr1cky-Passphrase',
            },
        )

        self.assertEqual(response.status_code, 200)
        self.assertFalse(User.objects.filter(username='alopez').exists())
        self.assertIn('email', response.context['form'].errors)


class LoginDashboardTests(TestCase):

    def setUp(self) -> None:
        self.user = User.objects.create_user(username='ana', password='s3cret-pass', first_name='Ana')

    def test_login_and_logout(self) -> None:
        response = self.client.post(reverse('login'), {'username': 'ana', 'password': 's3cret-pass'})
        self.assertRedirects(response, reverse('dashboard'))

        response = self.client.get(reverse('logout'))
        self.assertRedirects(response, reverse('login'))

    def test_login_ignores_external_next(self) -> None:
        response = self.client.post(
            reverse('login'),
            {'username': 'ana', 'password': 's3cret-pass', 'next': 'https://evil.example/'},
        )
        self.assertRedirects(response, reverse('dashboard'))

    def test_bad_credentials(self) -> None:
        response = self.client.post(reverse('login'), {'username': 'ana', 'password': 'nope'})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Invalid username or password.')

    def test_dashboard_lists_team_cards(self) -> None:
        profile = ConsultantProfile.objects.create(user=self.user, display_name='Ana Lopez')
        for index, industry in enumerate(['Retail', 'Energy', 'Healthcare', 'Technology']):
            project = Project.objects.create(
                name=f'Project {index}',
                start_date=date(2022, 1, 1),
                end_date=date(2022, 3, 1),
                industry=industry,
            )
            profile.projects.add(project)
        self.client.force_login(self.user)

        response = self.client.get(reverse('dashboard'))

        self.assertEqual(response.status_code, 200)
        card = response.context['cards'][0]
        self.assertEqual(card['profile'], profile)
        self.assertEqual(card['metrics'].total_projects, 4)
        self.assertEqual(card['metrics'].total_months, 8.0)
        self.assertEqual(
            [industry['name'] for industry in card['top_industries']],
            ['Technology', 'Healthcare', 'Retail'],
        )
        self.assertEqual(card['more_industries'], 1)
        self.assertEqual(response.context['project_count'], 4)
        self.assertEqual(response.context['own_profile'], profile)


class UserAPITests(APITestCase):

    def test_me(self) -> None:
        user = User.objects.create_user(username='ana', password='x')
        self.client.force_authenticate(user)

        response = self.client.get(reverse('user-me'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['username'], 'ana')
        self.assertNotIn('password', response.data)

    def test_list_requires_staff(self) -> None:
        user = User.objects.create_user(username='ana', password='x')
        self.client.force_authenticate(user)

        response = self.client.get(reverse('user-list'))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_consultant_cannot_promote_self(self) -> None:
        user = User.objects.create_user(username='ana', password='x')
        self.client.force_authenticate(user)

        response = self.client.patch(
            reverse('user-detail', args=[user.id]),
            {'role': User.ADMIN},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        user.refresh_from_db()
        self.assertEqual(user.role, User.CONSULTANT)

    def test_me_links_profile(self) -> None:
        user = User.objects.create_user(username='ana', password='x')
        profile = ConsultantProfile.objects.create(user=user)
        self.client.force_authenticate(user)

        response = self.client.get(reverse('user-me'))

        self.assertEqual(response.data['profile_id'], profile.id)
        self.assertFalse(response.data['is_admin_role'])
