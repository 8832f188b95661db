import pytest

from board import row_span, slot_x
from config import SortConfig
from visual import CardRow, MissingTokenError, Motion, smoothstep


def make_row(config, values):
    row = CardRow(config)
    row.set_slot_count(len(values))
    tokens = [row.create_token(v, slot) for slot, v in enumerate(values)]
    return row, tokens


def test_slots_are_centred(config):
    center = config.window_width / 2
    assert slot_x(0, 1, config) == center
    assert slot_x(0, 3, config) == center - config.card_spacing
    assert slot_x(2, 3, config) == center + config.card_spacing
    left, right = row_span(3, config)
    assert right - left == 2 * config.card_spacing + config.card_width


def test_tokens_are_placed_on_their_slots(config):
    row, tokens = make_row(config, [4, 8, 1])
    assert [row.cards[t].x for t in tokens] == [slot_x(k, 3, config) for k in range(3)]
    assert all(row.cards[t].y == config.row_center_y for t in tokens)
    assert row.cards[tokens[1]].label == "8"
    assert row.cards[tokens[2]].label == "A"


def test_move_to_slot_finishes_after_duration(config):
    row, tokens = make_row(config, [4, 8])
    motion = row.move_to_slot(tokens[0], 1)
    assert not motion.done
    row.update(config.move_duration / 2)
    assert not motion.done
    assert slot_x(0, 2, config) < row.cards[tokens[0]].x < slot_x(1, 2, config)
    row.update(config.move_duration)
    assert motion.done
    assert row.cards[tokens[0]].x == pytest.approx(slot_x(1, 2, config))
    assert not row.cards[tokens[0]].moving


def test_positive_vertical_delta_lifts(config):
    row, tokens = make_row(config, [4])
    row.move_vertical(tokens[0], 40)
    row.update(1.0)
    assert row.cards[tokens[0]].y == pytest.approx(config.row_center_y - 40)
    row.move_vertical(tokens[0], -40)
    row.update(1.0)
    assert row.cards[tokens[0]].y == pytest.approx(config.row_center_y)


def test_horizontal_move_keeps_height(config):
    row, tokens = make_row(config, [4, 5])
    row.move_vertical(tokens[1], 40)
    row.update(1.0)
    row.move_to_slot(tokens[1], 0)
    row.update(1.0)
    card = row.cards[tokens[1]]
    assert (card.x, card.y) == pytest.approx((slot_x(0, 2, config), config.row_center_y - 40))


def test_destroy_releases_waiting_motion(config):
    row, tokens = make_row(config, [4, 5])
    motion = row.move_to_slot(tokens[0], 1)
    row.destroy_token(tokens[0])
    assert motion.done
    assert tokens[0] not in row.cards
    row.destroy_token(tokens[0])


def test_missing_token_raises(config):
    row, _ = make_row(config, [4])
    with pytest.raises(MissingTokenError):
        row.move_to_slot(999, 0)
    with pytest.raises(MissingTokenError):
        row.move_vertical(999, 10)


def test_zero_duration_moves_are_instant():
    config = SortConfig(move_duration=0.0)
    row, tokens = make_row(config, [4, 5])
    motion = row.move_to_slot(tokens[0], 1)
    assert motion.done
    assert row.cards[tokens[0]].x == slot_x(1, 2, config)


def test_new_motion_replaces_old(config):
    row, tokens = make_row(config, [4, 5])
    first = row.move_to_slot(tokens[0], 1)
    second = row.move_vertical(tokens[0], 10)
    assert first.done and not second.done


def test_lifted_cards_draw_last(config):
    row, tokens = make_row(config, [4, 5, 6])
    row.move_vertical(tokens[0], 40)
    row.update(1.0)
    assert row.draw_order()[-1].token == tokens[0]


def test_motion_easing():
    assert smoothstep(0.0) == 0.0
    assert smoothstep(1.0) == 1.0
    motion = Motion(start=(0.0, 0.0), end=(10.0, 0.0), duration=1.0, elapsed=0.5)
    assert motion.position() == pytest.approx((5.0, 0.0))
