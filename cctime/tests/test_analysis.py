import unittest
from datetime import datetime, timedelta, timezone

from cctime.analysis import hourly_activity, project_activity, project_name, session_details, user_gaps
from cctime.models import Event

BASE = datetime(2025, 8, 9, 9, 0, tzinfo=timezone.utc)


def _ev(minutes: float, *, session: str = "s1", role: str | None = "user", cwd: str | None = None) -> Event:
    return Event(timestamp=BASE + timedelta(minutes=minutes), sessionId=session, role=role, cwd=cwd)


class AnalysisTests(unittest.TestCase):
    def test_project_name(self) -> None:
        self.assertEqual(project_name("/home/me/work/api"), "api")
        self.assertEqual(project_name("C:\\Users\\me\\site"), "site")
        self.assertEqual(project_name(None), "Unknown Project")
        self.assertEqual(project_name("", "Unknown"), "Unknown")

    def test_project_activity_sorted_by_active_time(self) -> None:
        events = [
            _ev(0, cwd="/w/small"),
            _ev(1, cwd="/w/big", session="a"),
            _ev(3, cwd="/w/big", session="a"),
            _ev(6, cwd="/w/big", session="b"),
            _ev(7),
        ]
        projects = project_activity(events)
        self.assertEqual([p.projectName for p in projects][0], "big")
        big = projects[0]
        self.assertEqual(big.messageCount, 3)
        self.assertEqual(big.activeMinutes, 5)
        self.assertEqual(big.sessionCount, 2)
        self.assertEqual({p.projectName for p in projects}, {"big", "small", "Unknown Project"})

    def test_session_details_longest_first(self) -> None:
        events = [_ev(0, cwd="/w/a"), _ev(2), _ev(20, cwd="/w/b"), _ev(22), _ev(25), _ev(27)]
        details = session_details(list(reversed(events)))
        self.assertEqual([d.durationMinutes for d in details], [7, 2])
        self.assertEqual(details[0].messageCount, 4)
        self.assertEqual(details[0].project, "b")
        self.assertEqual(details[1].project, "a")
        self.assertEqual(session_details([]), [])

    def test_user_gaps_only_count_user_messages_over_threshold(self) -> None:
        events = [
            _ev(0),
            _ev(1, role="assistant"),
            _ev(3),
            _ev(10, role="assistant"),
            _ev(20, cwd="/w/p"),
            _ev(80),
        ]
        gaps = user_gaps(events)
        self.assertEqual([g.gapMinutes for g in gaps], [60, 17])
        self.assertEqual(gaps[1].project, "p")
        self.assertEqual(gaps[1].timestamp, BASE + timedelta(minutes=20))

    def test_hourly_activity_uses_local_hours(self) -> None:
        tz = timezone(timedelta(hours=2))
        events = [_ev(0), _ev(30), _ev(24 * 60)]
        buckets = hourly_activity(events, tz)
        self.assertEqual(len(buckets), 24)
        self.assertEqual(buckets[11].messageCount, 3)
        self.assertEqual(buckets[11].days, ["2025-08-09", "2025-08-10"])
        self.assertEqual(sum(b.messageCount for b in buckets), 3)


if __name__ == "__main__":
    unittest.main()
