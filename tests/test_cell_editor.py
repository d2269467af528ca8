"""Tests for the single-cell editing session."""

import asyncio

import pytest

from gridcore.cell_editor import CellEditor
from gridcore.clipboard import CellClipboard
from gridcore.data_models import Cell


@pytest.fixture
def editor(grid, attributes, onyx):
    return CellEditor(grid, 0, 0, attributes, backdrops=[onyx], clipboard=CellClipboard())


async def populated(editor):
    await editor.select_gift("Plush Pepe")
    editor.select_model("Amalgam")
    editor.select_pattern("Stars")
    editor.select_backdrop("Onyx Black")
    return editor


@pytest.mark.asyncio
async def test_selecting_gift_loads_options(editor):
    await editor.select_gift("Plush Pepe")

    assert [m.name for m in editor.models] == ["Amalgam", "Kung Fu Pepe"]
    assert [p.name for p in editor.patterns] == ["Stars", "Hearts"]


@pytest.mark.asyncio
@pytest.mark.parametrize("new_gift", ["Santa Hat", None])
async def test_gift_change_clears_dependent_fields(editor, new_gift):
    await populated(editor)
    assert editor.backdrop is not None

    await editor.select_gift(new_gift)

    assert editor.gift == new_gift
    assert (editor.model, editor.pattern, editor.backdrop) == (None, None, None)


@pytest.mark.asyncio
async def test_gift_change_clears_before_options_arrive(editor):
    await populated(editor)

    task = asyncio.ensure_future(editor.select_gift("Santa Hat"))
    await asyncio.sleep(0)
    assert editor.gift == "Santa Hat"
    assert (editor.model, editor.pattern, editor.backdrop) == (None, None, None)
    assert editor.models == []
    await task
    assert [m.name for m in editor.models] == ["Frosty"]


@pytest.mark.asyncio
async def test_stale_options_are_discarded(editor):
    first = asyncio.ensure_future(editor.select_gift("Plush Pepe"))
    await asyncio.sleep(0)
    await editor.select_gift("Santa Hat")
    await first

    assert editor.gift == "Santa Hat"
    assert [p.name for p in editor.patterns] == ["Snowflakes"]


def test_dependent_fields_need_a_gift(editor):
    editor.select_model("Amalgam")
    editor.select_backdrop("Onyx Black")
    assert editor.model is None
    assert editor.backdrop is None


@pytest.mark.asyncio
async def test_unknown_backdrop_clears_selection(editor):
    await populated(editor)
    editor.select_backdrop("No Such Backdrop")
    assert editor.backdrop is None


@pytest.mark.asyncio
async def test_apply_link(editor):
    assert await editor.apply_link("t.me/nft/Santa-Hat-77") is True
    assert editor.gift == "Santa Hat"

    assert await editor.apply_link("not a link") is False
    assert editor.gift == "Santa Hat"


@pytest.mark.asyncio
async def test_save_writes_to_grid(editor, grid, onyx):
    await populated(editor)

    editor.save()

    assert grid.get_cell(0, 0) == Cell(gift="Plush Pepe", model="Amalgam", backdrop=onyx, pattern="Stars")
    assert editor.preview_ready


@pytest.mark.asyncio
async def test_copy_paste_across_editors(editor, grid, attributes, onyx):
    await populated(editor)
    editor.copy()

    other = CellEditor(grid, 2, 1, attributes, backdrops=[onyx], clipboard=editor.clipboard)
    assert await other.paste() is True
    other.save()

    assert grid.get_cell(2, 1) == editor.snapshot()


@pytest.mark.asyncio
async def test_paste_with_empty_clipboard(editor):
    assert await editor.paste() is False
    assert editor.snapshot() == Cell()


@pytest.mark.asyncio
async def test_paste_loads_options_for_pasted_gift(grid, attributes, onyx):
    clipboard = CellClipboard()
    clipboard.copy(Cell(gift="Plush Pepe", model="Amalgam", backdrop=onyx, pattern="Stars"))
    await attributes.get_models("Plush Pepe")
    await attributes.get_patterns("Plush Pepe")

    editor = CellEditor(grid, 1, 0, attributes, backdrops=[onyx], clipboard=clipboard)
    await editor.select_gift("Santa Hat")
    assert [m.name for m in editor.models] == ["Frosty"]

    assert await editor.paste() is True

    assert editor.snapshot() == clipboard.paste()
    assert [m.name for m in editor.models] == ["Amalgam", "Kung Fu Pepe"]
    assert [p.name for p in editor.patterns] == ["Stars", "Hearts"]


def test_editor_seeded_from_existing_cell(grid, attributes, onyx):
    grid.set_cell(1, 1, Cell(gift="Plush Pepe", model="Amalgam", backdrop=onyx))

    editor = CellEditor(grid, 1, 1, attributes)

    assert (editor.gift, editor.model, editor.backdrop) == ("Plush Pepe", "Amalgam", onyx)
