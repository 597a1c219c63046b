# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Sessions, attendance batches and the attendance views."""
import pytest

from conftest import attendance_count

SESSION = {"sessionDate": "2026-03-01T18:00:00Z", "motiontype": "THW ban homework", "Chair": "Ira"}


@pytest.fixture
def people(api):
    return {
        "cabinet": api.register("cabinet"),
        "president": api.register("President"),
        "m1": api.register("Member", name="Alpha"),
        "m2": api.register("Member", name="Beta"),
    }


class TestCreateSession:
    def test_create_with_attendance(self, api, people):
        body = {**SESSION, "attendanceData": [
            {"memberId": people["m1"]["id"], "status": "Present", "speakerScore": 7.5},
            {"memberId": people["m2"]["id"], "status": "Absent"},
            {"cabinetId": people["cabinet"]["id"], "status": "Present", "speakerScore": 6},
        ]}
        r = api.post("/api/cabinet/session/create", people["cabinet"]["token"], body)
        assert r.status_code == 201, r.text
        session = r.json()["session"]
        assert session["motiontype"] == "THW ban homework"
        assert session["Chair"] == "Ira"
        assert len(session["attendance"]) == 3
        absent = [a for a in session["attendance"] if a["status"] == "Absent"][0]
        assert absent["speakerScore"] == 0

    def test_create_without_attendance(self, api, people):
        r = api.post("/api/cabinet/session/create", people["president"]["token"], SESSION)
        assert r.status_code == 201
        assert r.json()["session"]["attendance"] == []

    def test_missing_details_is_400(self, api, people):
        r = api.post("/api/cabinet/session/create", people["cabinet"]["token"],
                     {"motiontype": "x", "Chair": "y"})
        assert r.status_code == 400

    def test_member_cannot_create(self, api, people):
        r = api.post("/api/cabinet/session/create", people["m1"]["token"], SESSION)
        assert r.status_code == 403


class TestMarkAttendance:
    def _session_id(self, api, people):
        r = api.post("/api/cabinet/session/create", people["cabinet"]["token"], SESSION)
        return r.json()["session"]["id"]

    def test_mark_on_existing_session(self, api, people):
        sid = self._session_id(api, people)
        r = api.post("/api/cabinet/attendance/mark", people["cabinet"]["token"], {
            "sessionId": sid,
            "attendanceData": [{"memberId": people["m1"]["id"], "status": "Present",
                                "speakerScore": 8}],
        })
        assert r.status_code == 201
        assert r.json()["session"]["id"] == sid
        assert len(r.json()["session"]["attendance"]) == 1

    def test_mark_creates_session_from_details(self, api, people, container):
        r = api.post("/api/cabinet/attendance/mark", people["cabinet"]["token"], {
            **SESSION,
            "attendanceData": [{"memberId": people["m1"]["id"], "status": "Present"}],
        })
        assert r.status_code == 201
        assert len(container.session_repo.list_sessions()) == 1

    def test_unknown_session_is_404(self, api, people):
        r = api.post("/api/cabinet/attendance/mark", people["cabinet"]["token"], {
            "sessionId": "missing",
            "attendanceData": [{"memberId": people["m1"]["id"], "status": "Present"}],
        })
        assert r.status_code == 404

    def test_empty_batch_is_400(self, api, people):
        sid = self._session_id(api, people)
        r = api.post("/api/cabinet/attendance/mark", people["cabinet"]["token"],
                     {"sessionId": sid, "attendanceData": []})
        assert r.status_code == 400

    def test_invalid_member_rejects_whole_batch(self, api, people, container):
        sid = self._session_id(api, people)
        r = api.post("/api/cabinet/attendance/mark", people["cabinet"]["token"], {
            "sessionId": sid,
            "attendanceData": [
                {"memberId": people["m1"]["id"], "status": "Present"},
                {"memberId": "ghost", "status": "Present"},
            ],
        })
        assert r.status_code == 400
        assert "ghost" in r.json()["message"]
        assert attendance_count(container.engine, sid) == 0

    def test_record_needs_exactly_one_attendee(self, api, people):
        sid = self._session_id(api, people)
        r = api.post("/api/cabinet/attendance/mark", people["cabinet"]["token"], {
            "sessionId": sid,
            "attendanceData": [{"memberId": people["m1"]["id"],
                                "cabinetId": people["cabinet"]["id"], "status": "Present"}],
        })
        assert r.status_code == 400

    def test_bad_status_is_400(self, api, people):
        sid = self._session_id(api, people)
        r = api.post("/api/cabinet/attendance/mark", people["cabinet"]["token"], {
            "sessionId": sid,
            "attendanceData": [{"memberId": people["m1"]["id"], "status": "Late"}],
        })
        assert r.status_code == 400

    def test_negative_score_is_400(self, api, people):
        sid = self._session_id(api, people)
        r = api.post("/api/cabinet/attendance/mark", people["cabinet"]["token"], {
            "sessionId": sid,
            "attendanceData": [{"memberId": people["m1"]["id"], "status": "Present",
                                "speakerScore": -1}],
        })
        assert r.status_code == 400


class TestAttendanceViews:
    def _seed(self, api, people):
        api.post("/api/cabinet/session/create", people["cabinet"]["token"], {
            **SESSION, "attendanceData": [
                {"memberId": people["m1"]["id"], "status": "Present", "speakerScore": 5},
                {"memberId": people["m2"]["id"], "status": "Absent"},
                {"cabinetId": people["cabinet"]["id"], "status": "Present"},
            ]})

    def test_member_sees_own_attendance(self, api, people):
        self._seed(api, people)
        r = api.get("/api/member/attendance", people["m1"]["token"])
        assert r.status_code == 200
        rows = r.json()["attendance"]
        assert len(rows) == 1
        assert rows[0]["session"]["motiontype"] == SESSION["motiontype"]

    def test_president_reads_member_attendance(self, api, people):
        self._seed(api, people)
        r = api.get("/api/member/attendance", people["president"]["token"],
                    params={"memberId": people["m2"]["id"]})
        assert r.status_code == 200
        assert r.json()["attendance"][0]["status"] == "Absent"

    def test_president_without_member_id_is_400(self, api, people):
        r = api.get("/api/member/attendance", people["president"]["token"])
        assert r.status_code == 400

    def test_cabinet_own_attendance(self, api, people):
        self._seed(api, people)
        r = api.get("/api/cabinet/attendance/my", people["cabinet"]["token"])
        assert r.status_code == 200
        assert len(r.json()["attendance"]) == 1

    def test_attendance_report_counts(self, api, people):
        self._seed(api, people)
        r = api.get("/api/president/attendance-report", people["president"]["token"])
        assert r.status_code == 200
        report = r.json()["sessions"][0]
        assert report["presentCount"] == 2
        assert report["absentCount"] == 1
        assert {a["name"] for a in report["attendance"]} == {"Alpha", "Beta", "Cabinet 1"}

    def test_sessions_listed_newest_first(self, api, people):
        api.post("/api/cabinet/session/create", people["cabinet"]["token"], SESSION)
        api.post("/api/cabinet/session/create", people["cabinet"]["token"],
                 {**SESSION, "sessionDate": "2026-04-01T18:00:00Z"})
        r = api.get("/api/president/sessions", people["president"]["token"])
        dates = [s["sessionDate"] for s in r.json()["sessions"]]
        assert dates[0].startswith("2026-04-01")
        assert len(dates) == 2
