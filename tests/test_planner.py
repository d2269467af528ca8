"""Tests for the application coordinator."""

from unittest.mock import MagicMock

import pytest
import requests

from gridconfig import PlannerConfiguration
from gridcore.data_models import Cell
from gridcore.planner import FALLBACK_GIFTS, GiftPlanner
from gridcore.remote_cache import RemoteDataCache
from gridcore.session_store import SessionStore

from conftest import BASE_URL


@pytest.fixture
def planner(remote):
    return GiftPlanner(PlannerConfiguration(api_base_url=BASE_URL, prewarm_count=5), remote=remote)


@pytest.mark.asyncio
async def test_start_loads_catalog_and_prewarms(planner, routes):
    await planner.start()

    assert planner.loading is False
    assert planner.gifts == ["Plush Pepe", "Durov's Cap", "Santa Hat"]
    assert [b.name for b in planner.backdrops] == ["Onyx Black", "Sky Blue"]
    assert planner.backdrops[1].center_color == "#82ccdd"
    assert planner.attributes.cached_gifts == ["Plush Pepe", "Durov's Cap", "Santa Hat"]
    assert routes.calls[:2] == ["/gifts", "/backdrops"]


@pytest.mark.asyncio
async def test_start_falls_back_to_builtin_gifts():
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("offline")
    remote = RemoteDataCache(SessionStore(), base_url=BASE_URL, backoff_seconds=0, session=session)
    planner = GiftPlanner(PlannerConfiguration(api_base_url=BASE_URL, prewarm_count=1), remote=remote)

    await planner.start()

    assert planner.gifts == list(FALLBACK_GIFTS)
    assert planner.backdrops == []
    assert planner.attributes.cached_models("Santa Hat") == []
    assert planner.loading is False


@pytest.mark.asyncio
async def test_editor_round_trip(planner):
    await planner.start()

    editor = planner.open_editor(1, 2)
    await editor.select_gift("Plush Pepe")
    editor.select_model("Kung Fu Pepe")
    editor.select_pattern("Hearts")
    editor.select_backdrop("Sky Blue")
    editor.save()

    cell = planner.grid.get_cell(1, 2)
    assert cell.backdrop.name == "Sky Blue"
    assert len(planner.ring_layout(cell)) == 60


def test_image_urls_use_normalized_gift(planner):
    assert planner.model_image_url("Plush Pepe", "Amalgam") == f"{BASE_URL}/model/plush-pepe/Amalgam.png?size=128"
    assert planner.pattern_image_url("Durov's Cap", "Stars", size=64) == f"{BASE_URL}/pattern/durov's-cap/Stars.png?size=64"


def test_ring_layout_for_empty_cell(planner):
    assert planner.ring_layout(None).is_empty
    assert planner.ring_layout(Cell(gift="Plush Pepe")).is_empty


def test_session_dir_selects_file_store(tmp_path):
    planner = GiftPlanner(PlannerConfiguration(session_dir=tmp_path / "session"))
    try:
        assert (tmp_path / "session").is_dir()
        assert planner.remote.base_url == "https://api.changes.tg"
    finally:
        planner.close()
