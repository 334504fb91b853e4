from __future__ import annotations

import copy

from django.test import SimpleTestCase

from dashboardapp.periods import Period
from dashboardapp.stats import ACTIVITY_LIMIT, activity_feed, compute_stats, percent

MARCH = Period(2025, 2)


def _visit(vid, status, outcome, day="2025-03-10"):
    return {"id": vid, "date": day, "time": "09:00", "status": status, "outcome": outcome}


def _roster():
    return [
        {"id": "d1", "executive": "LUIS", "classification": "A", "visits": [
            _visit("v1", "planned", "PLANEADA"),
            _visit("v2", "completed", "SEGUIMIENTO"),
            _visit("v3", "planned", "CITA"),
            _visit("v4", "planned", "AUSENTE"),
            _visit("v5", "planned", "CANCELADA"),
            _visit("v6", "completed", "AUSENTE"),
            _visit("v7", "completed", "INTERESADO", day="2025-04-02"),
        ]},
        {"id": "d2", "executive": "ORALIA", "classification": "B", "visits": [
            _visit("v8", "completed", "COTIZACIÓN"),
        ]},
        {"id": "d3", "executive": "LUIS", "classification": None, "visits": []},
    ]


def _procedures():
    return [
        {"id": "p1", "date": "2025-03-05", "doctorId": "d1", "cost": 1000, "commission": 30, "status": "performed"},
        {"id": "p2", "date": "2025-03-20", "doctorId": "d2", "cost": 500, "commission": 15, "status": "performed"},
        {"id": "p3", "date": "2025-03-21", "doctorId": "d1", "cost": 900, "commission": 27, "status": "scheduled"},
        {"id": "p4", "date": "2025-02-21", "doctorId": "d1", "cost": 700, "commission": 21, "status": "performed"},
    ]


class PercentTest(SimpleTestCase):
    def test_rounding(self):
        self.assertEqual(percent(0, 0), 0)
        self.assertEqual(percent(1, 3), 33)
        self.assertEqual(percent(2, 3), 67)
        self.assertEqual(percent(1, 8), 13)  # 12.5 rounds up
        self.assertEqual(percent(5, 5), 100)


class ComputeStatsTest(SimpleTestCase):
    def test_global_counts(self):
        dash = compute_stats(_roster(), _procedures(), MARCH)
        self.assertEqual(dash.totalDoctors, 3)
        # PLANEADA + CITA
        self.assertEqual(dash.plannedVisits, 2)
        # SEGUIMIENTO, reported AUSENTE, COTIZACIÓN
        self.assertEqual(dash.completedVisits, 3)
        # planned AUSENTE + planned CANCELADA
        self.assertEqual(dash.otherVisits, 2)
        self.assertEqual(dash.performance, percent(3, 7))
        self.assertEqual(dash.classifications, {"A": 1, "B": 1, "C": 0, "None": 1})

    def test_revenue_only_counts_performed(self):
        dash = compute_stats(_roster(), _procedures(), MARCH)
        self.assertEqual(dash.totalRevenue, 1500)
        self.assertEqual(dash.totalCommission, 45)

    def test_executive_scope(self):
        dash = compute_stats(_roster(), _procedures(), MARCH, executive="ORALIA")
        self.assertEqual(dash.totalDoctors, 1)
        self.assertEqual((dash.plannedVisits, dash.completedVisits, dash.otherVisits), (0, 1, 0))
        self.assertEqual(dash.totalRevenue, 500)
        self.assertEqual([p["id"] for p in dash.recentProcedures], ["p2"])
        self.assertEqual(dash.performance, 100)

    def test_whole_year(self):
        dash = compute_stats(_roster(), _procedures(), Period(2025))
        self.assertEqual(dash.completedVisits, 4)
        self.assertEqual(dash.totalRevenue, 2200)

    def test_recent_procedures_sorted_and_capped(self):
        procs = [
            {"id": f"p{n}", "date": f"2025-03-{n:02d}", "doctorId": "d1", "status": "scheduled"}
            for n in range(1, 16)
        ]
        dash = compute_stats(_roster(), procs, MARCH)
        ids = [p["id"] for p in dash.recentProcedures]
        self.assertEqual(len(ids), 10)
        self.assertEqual(ids[0], "p15")
        self.assertEqual(ids[-1], "p6")

    def test_same_day_keeps_input_order(self):
        procs = [
            {"id": "a", "date": "2025-03-03", "status": "performed"},
            {"id": "b", "date": "2025-03-03", "status": "performed"},
        ]
        dash = compute_stats([], procs, MARCH)
        self.assertEqual([p["id"] for p in dash.recentProcedures], ["a", "b"])

    def test_team_breakdown_is_stricter(self):
        dash = compute_stats(_roster(), _procedures(), MARCH, executives=[{"name": "LUIS", "color": "blue"}, "ORALIA"])
        luis, oralia = dash.teamBreakdown
        self.assertEqual(luis["name"], "LUIS")
        self.assertEqual(luis["color"], "blue")
        self.assertEqual(luis["doctors"], 2)
        # PLANEADA + planned CANCELADA; CITA and planned AUSENTE left out
        self.assertEqual(luis["planned"], 2)
        self.assertEqual(luis["completed"], 2)
        self.assertEqual(luis["performance"], 50)
        self.assertEqual((luis["revenue"], luis["commission"]), (1000, 30))
        self.assertEqual((oralia["revenue"], oralia["completed"], oralia["color"]), (500, 1, ""))

    def test_default_team_comes_from_roster(self):
        dash = compute_stats(_roster(), [], MARCH)
        self.assertEqual([r["name"] for r in dash.teamBreakdown], ["LUIS", "ORALIA"])

    def test_empty_inputs(self):
        dash = compute_stats([], [], MARCH)
        self.assertEqual(dash.totalDoctors, 0)
        self.assertEqual(dash.performance, 0)
        self.assertEqual(dash.teamBreakdown, [])
        self.assertEqual(dash.recentProcedures, [])
        self.assertEqual(dash.as_dict()["classifications"], {"A": 0, "B": 0, "C": 0, "None": 0})

    def test_inputs_are_not_modified(self):
        roster, procs = _roster(), _procedures()
        before = copy.deepcopy((roster, procs))
        first = compute_stats(roster, procs, MARCH).as_dict()
        second = compute_stats(roster, procs, MARCH).as_dict()
        self.assertEqual((roster, procs), before)
        self.assertEqual(first, second)


class ActivityFeedTest(SimpleTestCase):
    def test_completed_visits_in_period_newest_first(self):
        dash = compute_stats(_roster(), [], MARCH)
        feed = dash.recentVisits
        self.assertEqual([v["id"] for v in feed], ["v2", "v6", "v8"])
        self.assertEqual(feed[2]["doctorName"], "")
        self.assertEqual((feed[2]["doctorId"], feed[2]["executive"]), ("d2", "ORALIA"))
        self.assertEqual(feed[0]["outcome"], "SEGUIMIENTO")

    def test_scoped_to_executive(self):
        dash = compute_stats(_roster(), [], Period(2025), executive="LUIS")
        self.assertEqual([v["id"] for v in dash.recentVisits], ["v7", "v2", "v6"])

    def test_capped(self):
        doc = {"id": "d1", "name": "DR. A", "executive": "LUIS", "visits": [
            _visit(f"v{n}", "completed", "SEGUIMIENTO", day=f"2025-03-{n % 28 + 1:02d}") for n in range(80)
        ]}
        feed = activity_feed([doc], MARCH)
        self.assertEqual(len(feed), ACTIVITY_LIMIT)
        self.assertEqual(feed[0]["date"], "2025-03-28")
        dates = [v["date"] for v in feed]
        self.assertEqual(dates, sorted(dates, reverse=True))
