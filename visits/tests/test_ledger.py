from __future__ import annotations

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase

from visits import ledger
from visits.exceptions import NotFoundError
from visits.states import Completed, Planned, visit_state


def _doctor(**extra):
    doc = {"id": "d1", "executive": "LUIS", "name": "DR. HOUSE", "visits": []}
    doc.update(extra)
    return doc


class PlanVisitTest(SimpleTestCase):
    def test_routine_visit(self):
        roster = [_doctor(), _doctor(id="d2", executive="ANGEL")]
        doc, visit = ledger.plan_visit(roster, "d1", "2025-03-10", "09:00", "seguimiento", False)

        self.assertEqual(len(doc["visits"]), 1)
        self.assertEqual(visit["status"], "planned")
        self.assertEqual(visit["outcome"], "PLANEADA")
        self.assertEqual(visit["note"], "VISITA PLANEADA")
        self.assertEqual(visit["objective"], "SEGUIMIENTO")
        self.assertEqual(visit["date"], "2025-03-10")
        self.assertEqual(visit["time"], "09:00")
        self.assertTrue(visit["id"])

        # inputs are left alone
        self.assertEqual(roster[0]["visits"], [])
        self.assertEqual(roster[1]["visits"], [])

    def test_appointment_and_default_objective(self):
        doc, visit = ledger.plan_visit([_doctor()], "d1", "2025-03-11", "10:30", "   ", True)
        self.assertEqual(visit["outcome"], "CITA")
        self.assertEqual(visit["note"], "CITA PROGRAMADA")
        self.assertEqual(visit["objective"], "VISITA")
        self.assertEqual(doc["visits"][0]["id"], visit["id"])

    def test_ids_are_unique(self):
        led = ledger.VisitLedger(_doctor())
        ids = {led.plan("2025-03-10")["id"] for _ in range(20)}
        self.assertEqual(len(ids), 20)

    def test_requires_a_doctor(self):
        with self.assertRaises(ValidationError):
            ledger.plan_visit([_doctor()], "", "2025-03-10")
        with self.assertRaises(ValidationError):
            ledger.plan_visit([_doctor()], "nope", "2025-03-10")

    def test_blank_date_is_not_rejected(self):
        doc, visit = ledger.plan_visit([_doctor()], "d1", "")
        self.assertEqual(visit["date"], "")
        self.assertEqual(doc["visits"][0]["status"], "planned")


class ReportVisitTest(SimpleTestCase):
    def setUp(self):
        self.doc, self.visit = ledger.plan_visit([_doctor()], "d1", "2025-03-10", "09:00", "seguimiento")

    def test_report_completes_visit(self):
        doc = ledger.report_visit(
            [self.doc], "d1", self.visit["id"], "no llego", "AUSENTE", "2025-03-10", "09:00", "llamar lunes"
        )
        v = doc["visits"][0]
        self.assertEqual(v["id"], self.visit["id"])
        self.assertEqual(v["status"], "completed")
        self.assertEqual(v["outcome"], "AUSENTE")
        self.assertEqual(v["note"], "NO LLEGO")
        self.assertEqual(v["followUp"], "LLAMAR LUNES")
        self.assertIsInstance(visit_state(v), Completed)

    def test_second_report_overwrites(self):
        doc = ledger.report_visit([self.doc], "d1", self.visit["id"], "uno", "INTERESADO", "2025-03-10", "09:00")
        doc = ledger.report_visit([doc], "d1", self.visit["id"], "dos", "COTIZACIÓN", "2025-03-12", "11:30")
        self.assertEqual(len(doc["visits"]), 1)
        v = doc["visits"][0]
        self.assertEqual((v["note"], v["outcome"], v["date"], v["time"]), ("DOS", "COTIZACIÓN", "2025-03-12", "11:30"))
        self.assertEqual(v["status"], "completed")

    def test_blank_note_is_rejected_without_changes(self):
        with self.assertRaises(ValidationError):
            ledger.report_visit([self.doc], "d1", self.visit["id"], "   ", "SEGUIMIENTO", "2025-03-10")
        self.assertEqual(self.doc["visits"][0]["status"], "planned")

    def test_unknown_visit(self):
        with self.assertRaises(NotFoundError):
            ledger.report_visit([self.doc], "d1", "missing", "nota", "SEGUIMIENTO", "2025-03-10")

    def test_other_visits_untouched(self):
        led = ledger.VisitLedger(self.doc)
        other = led.plan("2025-03-20", "12:00", "demo")
        doc = ledger.report_visit([led.document()], "d1", self.visit["id"], "ok", "SEGUIMIENTO", "2025-03-10")
        untouched = [v for v in doc["visits"] if v["id"] == other["id"]][0]
        self.assertEqual(untouched, other)


class DeleteVisitTest(SimpleTestCase):
    def test_delete_and_noop(self):
        doc, visit = ledger.plan_visit([_doctor()], "d1", "2025-03-10")
        doc = ledger.delete_visit([doc], "d1", visit["id"])
        self.assertEqual(doc["visits"], [])

        again = ledger.delete_visit([doc], "d1", visit["id"])
        self.assertEqual(again["visits"], [])
        self.assertIsNone(ledger.delete_visit([doc], "ghost", visit["id"]))


class ReportDefaultsTest(SimpleTestCase):
    def test_sentinels_are_not_echoed(self):
        form = ledger.report_defaults({"note": "CITA PROGRAMADA", "outcome": "CITA", "date": "2025-01-02", "time": ""})
        self.assertEqual(form["note"], "")
        self.assertEqual(form["outcome"], "SEGUIMIENTO")
        self.assertEqual(form["time"], "09:00")

    def test_reported_values_are_kept(self):
        form = ledger.report_defaults({"note": "TODO BIEN", "outcome": "INTERESADO", "date": "2025-01-02", "time": "13:00"})
        self.assertEqual((form["note"], form["outcome"], form["time"]), ("TODO BIEN", "INTERESADO", "13:00"))


class VisitStateTest(SimpleTestCase):
    def test_planned_variants(self):
        self.assertEqual(visit_state({"status": "planned", "outcome": "CITA"}), Planned(is_appointment=True, outcome="CITA"))
        cancelled = visit_state({"status": "planned", "outcome": "CANCELADA"})
        self.assertTrue(cancelled.excluded)
        self.assertFalse(cancelled.is_appointment)
        self.assertIsNone(visit_state({"status": "archived"}))
