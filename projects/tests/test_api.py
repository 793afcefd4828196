from datetime import date
from unittest import mock

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.models import User
from projects.models import Project


class ProjectAPITests(APITestCase):

    def setUp(self) -> None:
        self.user = User.objects.create_user(username="ana", password="x")
        self.client.force_authenticate(self.user)
        self.project = Project.objects.create(
            name="Bank merger",
            start_date=date(2023, 1, 1),
            end_date=date(2023, 4, 30),
            industry="Financial Services",
            project_type="PMI",
            tools=["altus"],
        )
        Project.objects.create(
            name="Grid operating model",
            start_date=date(2022, 1, 1),
            end_date=date(2022, 4, 1),
            industry="Energy",
        )

    def test_list_with_filters(self) -> None:
        response = self.client.get(reverse("project-list"), {"tool": "altus"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p["name"] for p in response.data], ["Bank merger"])
        self.assertEqual(response.data[0]["duration_months"], 4.0)

    def test_create_validates_dates(self) -> None:
        response = self.client.post(
            reverse("project-list"),
            {
                "name": "Backwards",
                "start_date": "2023-05-01",
                "end_date": "2023-01-01",
                "industry": "Retail",
                "project_type": "Other",
                "tools": [],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_create(self) -> None:
        response = self.client.post(
            reverse("project-list"),
            {
                "name": "Clinic network",
                "start_date": "2023-05-01",
                "end_date": "2023-07-01",
                "industry": "Healthcare",
                "project_type": "Right-sizing",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["tools"], ["none"])

    def test_partial_update_keeps_other_fields(self) -> None:
        response = self.client.patch(
            reverse("project-detail", args=[self.project.id]),
            {"tools": ["modas"]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.project.refresh_from_db()
        self.assertEqual(self.project.tools, ["modas"])
        self.assertEqual(self.project.industry, "Financial Services")

    @mock.patch("projects.views.ProjectService.combined_records")
    def test_combined(self, mock_combined) -> None:
        mock_combined.return_value = [self.project.to_record()]

        response = self.client.get(reverse("project-combined"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["id"], self.project.id)
        self.assertEqual(response.data[0]["tools"], ["altus"])

    def test_sync_requires_admin(self) -> None:
        response = self.client.post(reverse("project-sync"))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    @mock.patch("projects.views.queue_harvest_sync", return_value="task-1")
    def test_sync_queues_task(self, mock_queue) -> None:
        admin = User.objects.create_user(username="boss", password="x", is_staff=True)
        self.client.force_authenticate(admin)

        response = self.client.post(reverse("project-sync"))

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data, {"task_id": "task-1"})
