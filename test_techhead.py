# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""TechHead: verification lifecycle, listings and account removal."""
from conftest import row_count
from debsoc.models.domain import Role
from debsoc.models.tables import anonymous_feedback


class TestVerify:
    def test_verify_president(self, api):
        president = api.register("President", verified=False)
        r = api.post("/api/techhead/verify/president", api.techhead_token,
                     {"presidentId": president["id"]})
        assert r.status_code == 200
        body = r.json()
        assert body["message"] == "President verified successfully"
        assert body["president"]["isVerified"] is True
        assert body["president"]["verifiedBy"]

    def test_verify_twice_is_400(self, api, container):
        cab = api.register("cabinet")
        before = container.user_repo.get_by_id(Role.CABINET, cab["id"])["verifiedBy"]
        r = api.post("/api/techhead/verify/cabinet", api.techhead_token, {"cabinetId": cab["id"]})
        assert r.status_code == 400
        assert r.json()["message"] == "Cabinet member is already verified"
        assert container.user_repo.get_by_id(Role.CABINET, cab["id"])["verifiedBy"] == before

    def test_verify_missing_id_is_400(self, api):
        r = api.post("/api/techhead/verify/member", api.techhead_token, {})
        assert r.status_code == 400

    def test_verify_unknown_is_404(self, api):
        r = api.post("/api/techhead/verify/member", api.techhead_token, {"memberId": "nope"})
        assert r.status_code == 404
        assert r.json()["message"] == "Member not found"

    def test_unverify_unverified_is_400(self, api):
        member = api.register("Member", verified=False)
        r = api.post("/api/techhead/unverify/member", api.techhead_token,
                     {"memberId": member["id"]})
        assert r.status_code == 400
        assert r.json()["message"] == "Member is not verified"

    def test_unverify_clears_verified_by(self, api, container):
        member = api.register("Member")
        r = api.post("/api/techhead/unverify/member", api.techhead_token,
                     {"memberId": member["id"]})
        assert r.status_code == 200
        account = container.user_repo.get_by_id(Role.MEMBER, member["id"])
        assert account["isVerified"] is False
        assert account["verifiedBy"] is None

    def test_only_techhead_may_verify(self, api):
        president = api.register("President")
        member = api.register("Member", verified=False)
        r = api.post("/api/techhead/verify/member", president["token"], {"memberId": member["id"]})
        assert r.status_code == 403


class TestListings:
    def test_unverified_and_verified_groups(self, api):
        pending = api.register("Member", name="Pending", verified=False)
        done = api.register("cabinet", name="Done")
        r = api.get("/api/techhead/unverified-users", api.techhead_token)
        assert r.status_code == 200
        body = r.json()
        assert [m["id"] for m in body["unverifiedMembers"]] == [pending["id"]]
        assert body["unverifiedCabinet"] == []
        assert body["unverifiedPresidents"] == []

        r = api.get("/api/techhead/verified-users", api.techhead_token)
        body = r.json()
        assert [c["id"] for c in body["verifiedCabinet"]] == [done["id"]]
        assert body["verifiedCabinet"][0]["position"] == "Convenor"
        assert body["verifiedMembers"] == []


class TestDelete:
    def test_delete_member_cascades(self, api, container):
        president = api.register("President")
        member = api.register("Member")
        api.post("/api/president/feedback/give", president["token"],
                 {"memberId": member["id"], "feedback": "Great rebuttal"})
        assert row_count(container.engine, anonymous_feedback) == 1

        r = api.client.request("DELETE", "/api/techhead/delete/member",
                               json={"memberId": member["id"]},
                               headers={"Authorization": f"Bearer {api.techhead_token}"})
        assert r.status_code == 200
        assert r.json()["message"] == "Member deleted successfully"
        assert container.user_repo.get_by_id(Role.MEMBER, member["id"]) is None
        assert row_count(container.engine, anonymous_feedback) == 0

    def test_deleted_account_token_is_401(self, api):
        member = api.register("Member")
        api.client.request("DELETE", "/api/techhead/delete/member",
                           json={"memberId": member["id"]},
                           headers={"Authorization": f"Bearer {api.techhead_token}"})
        assert api.get("/api/member/tasks", member["token"]).status_code == 401

    def test_delete_unknown_is_404(self, api):
        r = api.client.request("DELETE", "/api/techhead/delete/president",
                               json={"presidentId": "ghost"},
                               headers={"Authorization": f"Bearer {api.techhead_token}"})
        assert r.status_code == 404
