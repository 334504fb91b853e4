from __future__ import annotations

import json

from django.contrib.auth.models import Group, User
from django.test import TestCase
from django.urls import reverse

from doctors import signals, store as doctor_store
from doctors.models import Doctor
from procedures import store as procedure_store
from reps.models import TimeOffEvent


class ExportViewsTest(TestCase):
    def setUp(self):
        self.manager = User.objects.create_user(username="boss", password="x")
        self.manager.groups.add(Group.objects.create(name="Manager"))
        self.rep = User.objects.create_user(username="luis", password="x")

        doctor_store.upsert_doctor({"id": "d1", "name": "DR. ÁLVAREZ", "executive": "LUIS", "visits": [
            {"id": "v1", "date": "2025-03-10", "time": "09:00", "status": "planned", "outcome": "PLANEADA"},
        ]})
        procedure_store.upsert_procedure({"id": "p1", "date": "2025-03-05", "doctorId": "d1", "cost": 1000})

    def test_visits_csv(self):
        self.client.force_login(self.rep)
        resp = self.client.get(reverse("exports:visits_csv"), {"year": "2025", "month": "2"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn("REPORTE_VISITAS_2025_2.csv", resp["Content-Disposition"])

        text = resp.content.decode("utf-8")
        self.assertTrue(text.startswith("\ufeff"))
        lines = text.lstrip("\ufeff").strip().split("\n")
        self.assertEqual(len(lines), 2)
        self.assertIn("DR. ÁLVAREZ", lines[1])

    def test_procedures_csv_whole_year(self):
        self.client.force_login(self.manager)
        resp = self.client.get(reverse("exports:procedures_csv"), {"year": "2025", "month": "ALL"})
        self.assertIn("REPORTE_PROCEDIMIENTOS_2025_ALL.csv", resp["Content-Disposition"])
        self.assertEqual(len(resp.content.decode("utf-8").strip().split("\n")), 2)

    def test_backup_is_manager_only(self):
        self.client.force_login(self.rep)
        self.assertEqual(self.client.get(reverse("exports:backup")).status_code, 302)

        self.client.force_login(self.manager)
        data = json.loads(self.client.get(reverse("exports:backup")).content)
        self.assertEqual([d["id"] for d in data["doctors"]], ["d1"])
        self.assertEqual([p["id"] for p in data["procedures"]], ["p1"])

    def test_restore_upserts_by_id(self):
        self.client.force_login(self.manager)
        payload = {
            "doctors": [{"id": "d1", "name": "DR. RENOMBRADO", "executive": "LUIS"}, {"id": "d2", "executive": "ANGEL"}],
            "procedures": [{"id": "p2", "date": "2025-01-01", "doctorId": "d2"}],
            "timeOff": [{"id": "t1", "executive": "ANGEL", "startDate": "2025-02-01", "endDate": "2025-02-03"}],
        }
        resp = self.client.post(reverse("exports:restore"), data=json.dumps(payload), content_type="application/json")
        self.assertEqual(resp.json()["restored"], {"doctors": 2, "procedures": 1, "timeOff": 1})
        self.assertEqual(Doctor.objects.get(pk="d1").name, "DR. RENOMBRADO")
        self.assertTrue(TimeOffEvent.objects.filter(pk="t1").exists())

    def test_restore_rejects_bad_files(self):
        self.client.force_login(self.manager)
        resp = self.client.post(reverse("exports:restore"), data="[]", content_type="application/json")
        self.assertEqual(resp.status_code, 400)

        bad = {"doctors": [{"id": "d5"}], "procedures": [{"id": "p5", "cost": -1}]}
        resp = self.client.post(reverse("exports:restore"), data=json.dumps(bad), content_type="application/json")
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(Doctor.objects.filter(pk="d5").exists())

    def test_restore_rejects_non_object_records(self):
        self.client.force_login(self.manager)
        for payload in ({"doctors": ["x"]}, {"doctors": [], "procedures": [7]}, {"doctors": [], "timeOff": "t1"}):
            resp = self.client.post(reverse("exports:restore"), data=json.dumps(payload), content_type="application/json")
            self.assertEqual(resp.status_code, 400, payload)


class RestoreNotificationTest(TestCase):
    def setUp(self):
        self.manager = User.objects.create_user(username="boss", password="x")
        self.manager.groups.add(Group.objects.create(name="Manager"))
        self.client.force_login(self.manager)
        self.announced = []
        signals.doctor_updated.connect(self._record)

    def tearDown(self):
        signals.doctor_updated.disconnect(self._record)

    def _record(self, sender, doctor, **kwargs):
        self.announced.append(doctor["id"])

    def _restore(self, payload):
        with self.captureOnCommitCallbacks(execute=True):
            return self.client.post(reverse("exports:restore"), data=json.dumps(payload), content_type="application/json")

    def test_failed_restore_announces_nothing(self):
        resp = self._restore({"doctors": [{"id": "d9"}], "procedures": [{"id": "p1", "cost": -5}]})
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(Doctor.objects.filter(pk="d9").exists())
        self.assertEqual(self.announced, [])

    def test_successful_restore_announces_each_doctor(self):
        resp = self._restore({"doctors": [{"id": "d1"}, {"id": "d2"}]})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.announced, ["d1", "d2"])
