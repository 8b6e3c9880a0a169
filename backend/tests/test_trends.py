# tests for trends router — snapshot over the stored history

import pytest

from tests.conftest import NOW_MS, DAY_MS, make_entry


class TestTrends:
    """GET /trends"""

    async def test_empty_history(self, client):
        resp = await client.get(f"/trends?now={NOW_MS}")
        assert resp.status_code == 200
        assert resp.json() == {
            "weeklyTrend": "stable",
            "emotionFrequency": {},
            "topEmotions": [],
            "insights": [],
            "recommendations": [],
            "monthlyComparison": "0 entries this month",
            "totalEntries": 0,
        }

    async def test_declining_week_with_stress(self, client, store):
        store.replace([
            make_entry(
                entry_id=f"w{i:011d}",
                timestamp=NOW_MS - (5 - i) * DAY_MS,
                emotions=["stressed"],
                intensity=intensity,
                sentiment="negative",
            )
            for i, intensity in enumerate([9, 9, 2, 2])
        ])
        resp = await client.get(f"/trends?now={NOW_MS}")
        assert resp.status_code == 200
        data = resp.json()
        assert data["weeklyTrend"] == "declining"
        assert data["emotionFrequency"] == {"stressed": 4}
        assert data["topEmotions"] == [{"emotion": "stressed", "count": 4, "emoji": "😫"}]
        assert data["insights"] == ["You've been having some challenging times lately."]
        assert len(data["recommendations"]) == 2
        assert data["monthlyComparison"] == "4 entries this month"
        assert data["totalEntries"] == 4

    async def test_without_now_uses_current_time(self, client, store):
        store.append(make_entry())
        resp = await client.get("/trends")
        assert resp.status_code == 200
        assert resp.json()["totalEntries"] == 1

    async def test_invalid_now(self, client):
        resp = await client.get("/trends?now=yesterday")
        assert resp.status_code == 400
        assert "error" in resp.json()
