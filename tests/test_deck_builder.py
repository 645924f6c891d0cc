import pytest

from hearthdeck.deck_builder import (
    CardPlacement,
    CardSpec,
    DeckBuilder,
    default_catalog,
    is_minion_id,
)


def _cards(n):
    return [CardSpec(i, f"card{i}", "", "frame.png", "portrait.png", 1) for i in range(n)]


@pytest.mark.parametrize("card_id", [1003, 1006, 1008, 1011, 1013, 1015, 1016, 2001, 2004,
                                     2008, 2009, 2010, 2011, 2013, 2014])
def test_minion_ids(card_id):
    assert is_minion_id(card_id) is True


@pytest.mark.parametrize("card_id", [1001, 1002, 1014, 2002, 2012])
def test_spell_ids(card_id):
    assert is_minion_id(card_id) is False


def test_catalog_ids_unique_and_ordered():
    ids = [card.id for card in default_catalog()]
    assert len(ids) == len(set(ids))
    assert ids[0] == 1001
    assert ids[-1] == 2014


def test_catalog_spells_have_no_stats():
    for card in default_catalog():
        if not card.shows_stats:
            assert (card.attack, card.health) == (0, 0)


def test_catalog_pinned_card():
    card = next(c for c in default_catalog() if c.id == 2014)
    assert card.cost == 25
    assert (card.attack, card.health) == (6, 3)
    assert card.portrait_path == "cards/portraits_KuangKengLaoBanLeiSiKa.png"


def test_empty_builder_label():
    builder = DeckBuilder([], 1920, 1080)
    assert builder.page_label() == "Page 1/1"
    assert builder.page_right() is False
    assert builder.layout() == []


def test_paging_visits_every_card_once():
    catalog = default_catalog()
    builder = DeckBuilder(catalog, 1920, 1080)
    seen = list(builder.current_cards())
    while builder.page_right():
        seen.extend(builder.current_cards())
    assert seen == catalog
    assert builder.page == builder.total_pages() - 1
    assert builder.page_right() is False


def test_page_left_stops_at_first_page():
    builder = DeckBuilder(_cards(10), 1920, 1080)
    assert builder.page_left() is False
    assert builder.page_right() is True
    assert builder.page_label() == f"Page 2/{builder.total_pages()}"
    assert builder.page_left() is True
    assert builder.page == 0


def test_pages_hold_at_most_eight():
    builder = DeckBuilder(_cards(9), 1920, 1080)
    assert len(builder.current_cards()) == 8
    builder.page_right()
    assert [c.id for c in builder.current_cards()] == [8]


def test_layout_grid():
    builder = DeckBuilder(_cards(8), 1920, 1080)
    placements = builder.layout()
    assert all(isinstance(p, CardPlacement) for p in placements)
    assert all(p.scale == 0.5 for p in placements)
    first_row = placements[:4]
    second_row = placements[4:]
    xs = [p.x for p in first_row]
    assert [b - a for a, b in zip(xs, xs[1:])] == [300.0, 300.0, 300.0]
    assert sum(xs) / 4 == pytest.approx(1920 / 2)
    assert all(p.y == 1080 - 250 for p in first_row)
    for top, bottom in zip(first_row, second_row):
        assert top.x == bottom.x
        assert top.y - bottom.y == 400.0


def test_layout_follows_current_page():
    builder = DeckBuilder(_cards(12), 1920, 1080)
    builder.page_right()
    assert [p.card.id for p in builder.layout()] == [8, 9, 10, 11]