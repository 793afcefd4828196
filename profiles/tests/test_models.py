from datetime import date

from django.test import SimpleTestCase

from accounts.models import User
from profiles.models import ConsultantProfile


class ConsultantProfileTests(SimpleTestCase):

    def test_name_falls_back_to_user(self) -> None:
        user = User(username='alopez', first_name='Ana', last_name='Lopez')

        self.assertEqual(ConsultantProfile(user=user).name, 'Ana Lopez')
        self.assertEqual(ConsultantProfile(user=User(username='bo')).name, 'bo')
        self.assertEqual(ConsultantProfile(user=user, display_name='Ana L.').name, 'Ana L.')

    def test_initials(self) -> None:
        profile = ConsultantProfile(user=User(username='x'), display_name='ana maria lopez')
        self.assertEqual(profile.initials, 'AML')

    def test_tenure(self) -> None:
        profile = ConsultantProfile(user=User(username='x'), start_date=date(2021, 1, 1))

        self.assertEqual(profile.tenure_months(today=date(2022, 7, 1)), 18.0)
        self.assertEqual(ConsultantProfile(user=User(username='y')).tenure_months(), 0.0)
