"""
Tests for the collection seeding script.
"""

import json

import pytest

from app.scripts.seed_collections import load_seed_file, seed


class TestLoadSeedFile:
    def test_loads_collections(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps({"reliefgoods": [{"title": "Water"}], "ourRecentlyWorks": []}))
        data = load_seed_file(path)
        assert data["reliefgoods"] == [{"title": "Water"}]

    @pytest.mark.parametrize("content", [[], {"reliefgoods": {"title": "x"}}, {"reliefgoods": ["x"]}])
    def test_rejects_bad_shapes(self, tmp_path, content):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps(content))
        with pytest.raises(ValueError):
            load_seed_file(path)


class TestSeed:
    @pytest.mark.asyncio
    async def test_inserts_records_and_ensures_index(self, fake_db):
        data = {
            "reliefgoods": [{"title": "Water"}, {"title": "Rice"}],
            "ourRecentlyWorks": [{"title": "Flood relief"}],
            "unknown": [{"ignored": True}],
        }

        total = await seed(fake_db, data)

        assert total == 3
        assert [d["title"] for d in fake_db["reliefgoods"].documents] == ["Water", "Rice"]
        assert fake_db["ourRecentlyWorks"].documents[0]["title"] == "Flood relief"
        assert "unknown" not in fake_db.collections
        assert fake_db["user"].unique_fields == {"email"}

    @pytest.mark.asyncio
    async def test_missing_collections_are_skipped(self, fake_db):
        assert await seed(fake_db, {}) == 0
