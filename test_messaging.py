# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Tasks, anonymous messages to the president and anonymous feedback."""
import pytest

DEADLINE = "2026-12-01T12:00:00Z"


@pytest.fixture
def people(api):
    return {
        "president": api.register("President", name="Prez"),
        "cabinet": api.register("cabinet"),
        "member": api.register("Member", name="Mira"),
    }


class TestTasks:
    def test_assign_to_member_and_list(self, api, people):
        r = api.post("/api/president/tasks/assign", people["president"]["token"], {
            "name": "Prep", "description": "Prepare case files", "deadline": DEADLINE,
            "assignedToMemberId": people["member"]["id"],
        })
        assert r.status_code == 201, r.text
        task = r.json()["task"]
        assert task["assignedToMemberId"] == people["member"]["id"]
        assert task["assignedBy"] == people["president"]["id"]

        r = api.get("/api/member/tasks", people["member"]["token"])
        assert [t["id"] for t in r.json()["tasks"]] == [task["id"]]
        assert api.get("/api/cabinet/tasks", people["cabinet"]["token"]).json()["tasks"] == []

    def test_assign_to_cabinet(self, api, people):
        r = api.post("/api/president/tasks/assign", people["president"]["token"], {
            "name": "Venue", "description": "Book the hall", "deadline": DEADLINE,
            "assignedToId": people["cabinet"]["id"],
        })
        assert r.status_code == 201
        tasks = api.get("/api/cabinet/tasks", people["cabinet"]["token"]).json()["tasks"]
        assert len(tasks) == 1

    def test_president_sees_all_tasks(self, api, people):
        for body in ({"assignedToId": people["cabinet"]["id"]},
                     {"assignedToMemberId": people["member"]["id"]}):
            api.post("/api/president/tasks/assign", people["president"]["token"], {
                "name": "T", "description": "D", "deadline": DEADLINE, **body})
        r = api.get("/api/cabinet/tasks", people["president"]["token"])
        assert len(r.json()["tasks"]) == 2

    def test_both_assignees_is_400(self, api, people):
        r = api.post("/api/president/tasks/assign", people["president"]["token"], {
            "name": "T", "description": "D", "deadline": DEADLINE,
            "assignedToId": people["cabinet"]["id"],
            "assignedToMemberId": people["member"]["id"],
        })
        assert r.status_code == 400

    def test_unknown_assignee_is_404(self, api, people):
        r = api.post("/api/president/tasks/assign", people["president"]["token"], {
            "name": "T", "description": "D", "deadline": DEADLINE,
            "assignedToMemberId": "ghost",
        })
        assert r.status_code == 404

    def test_cabinet_cannot_assign(self, api, people):
        r = api.post("/api/president/tasks/assign", people["cabinet"]["token"], {
            "name": "T", "description": "D", "deadline": DEADLINE,
            "assignedToMemberId": people["member"]["id"],
        })
        assert r.status_code == 403


class TestAnonymousMessages:
    def test_inbox_hides_sender(self, api, people):
        r = api.post("/api/member/messages/president", people["member"]["token"],
                     {"presidentId": people["president"]["id"], "message": "More practice rounds"})
        assert r.status_code == 201
        r = api.post("/api/cabinet/messages/president", people["cabinet"]["token"],
                     {"presidentId": people["president"]["id"], "message": "Budget?"})
        assert r.status_code == 201

        inbox = api.get("/api/president/messages", people["president"]["token"]).json()["messages"]
        assert len(inbox) == 2
        for item in inbox:
            assert set(item) == {"id", "message", "createdAt"}

    def test_sender_sees_own_messages(self, api, people):
        api.post("/api/member/messages/president", people["member"]["token"],
                 {"presidentId": people["president"]["id"], "message": "Hello"})
        r = api.get("/api/member/messages/sent", people["member"]["token"])
        sent = r.json()["messages"]
        assert len(sent) == 1
        assert sent[0]["presidentName"] == "Prez"
        assert api.get("/api/cabinet/messages/sent",
                       people["cabinet"]["token"]).json()["messages"] == []

    def test_president_sent_messages_is_empty(self, api, people):
        api.post("/api/member/messages/president", people["member"]["token"],
                 {"presidentId": people["president"]["id"], "message": "Hello"})
        r = api.get("/api/cabinet/messages/sent", people["president"]["token"])
        assert r.status_code == 200
        assert r.json()["messages"] == []

    def test_unknown_president_is_404(self, api, people):
        r = api.post("/api/member/messages/president", people["member"]["token"],
                     {"presidentId": "ghost", "message": "Hi"})
        assert r.status_code == 404
        assert r.json()["message"] == "President not found"

    def test_presidents_directory_lists_verified_only(self, api, people):
        api.register("President", name="Pending", verified=False)
        r = api.get("/api/member/presidents", people["member"]["token"])
        assert r.json()["presidents"] == [{"id": people["president"]["id"], "name": "Prez"}]


class TestAnonymousFeedback:
    def test_feedback_flow(self, api, people):
        r = api.post("/api/cabinet/feedback/give", people["cabinet"]["token"],
                     {"memberId": people["member"]["id"], "feedback": "Slow down"})
        assert r.status_code == 201
        r = api.post("/api/president/feedback/give", people["president"]["token"],
                     {"memberId": people["member"]["id"], "feedback": "Strong POIs"})
        assert r.status_code == 201

        received = api.get("/api/member/feedback", people["member"]["token"]).json()["feedbacks"]
        assert {f["senderType"] for f in received} == {"cabinet", "President"}
        for item in received:
            assert set(item) == {"id", "feedback", "senderType", "createdAt"}

        sent = api.get("/api/cabinet/feedback/sent", people["cabinet"]["token"]).json()["feedbacks"]
        assert sent[0]["memberName"] == "Mira"
        sent = api.get("/api/president/feedback/sent",
                       people["president"]["token"]).json()["feedbacks"]
        assert sent[0]["feedback"] == "Strong POIs"

    def test_president_reads_member_feedback(self, api, people):
        api.post("/api/president/feedback/give", people["president"]["token"],
                 {"memberId": people["member"]["id"], "feedback": "Nice"})
        r = api.get("/api/member/feedback", people["president"]["token"],
                    params={"memberId": people["member"]["id"]})
        assert r.status_code == 200
        assert len(r.json()["feedbacks"]) == 1

    def test_unknown_member_is_404(self, api, people):
        r = api.post("/api/cabinet/feedback/give", people["cabinet"]["token"],
                     {"memberId": "ghost", "feedback": "x"})
        assert r.status_code == 404

    def test_member_cannot_give_feedback(self, api, people):
        r = api.post("/api/cabinet/feedback/give", people["member"]["token"],
                     {"memberId": people["member"]["id"], "feedback": "x"})
        assert r.status_code == 403


class TestDashboard:
    def test_dashboard_lists_members_and_cabinet(self, api, people):
        api.register("Member", verified=False)
        r = api.get("/api/cabinet/dashboard", people["president"]["token"])
        assert r.status_code == 200
        body = r.json()
        assert len(body["members"]) == 2
        assert body["cabinet"][0]["position"] == "Convenor"
