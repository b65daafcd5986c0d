from __future__ import annotations

from modules.color.argb.form.state import initial_state
from modules.color.argb.form.url_state import (
    parse_url_state,
    share_query_string,
    to_query_params,
)
from modules.color.argb.model import ArgbColor


def test_no_params_gives_default_state() -> None:
    assert parse_url_state({}) == initial_state()


def test_preset_param() -> None:
    assert parse_url_state({"preset": "cyan"}).color == ArgbColor(255, 0, 255, 255)
    assert parse_url_state({"preset": "11"}).color == ArgbColor(0, 0, 0, 0)


def test_hex_param() -> None:
    state = parse_url_state({"hex": "FF0000FF"})
    assert state.color == ArgbColor(255, 0, 0, 255)
    assert state.hex_text == "#FF0000FF"


def test_int_param_accepts_signed_values() -> None:
    assert parse_url_state({"int": "-65536"}).color == ArgbColor(255, 255, 0, 0)


def test_precedence_is_preset_then_hex_then_int() -> None:
    params = {"preset": "Blue", "hex": "FF00FF00", "int": "0"}
    assert parse_url_state(params).color == ArgbColor(255, 0, 0, 255)


def test_invalid_values_fall_through(log_messages) -> None:
    state = parse_url_state({"preset": "Crimson", "hex": "#12", "int": "16"})
    assert state.color == ArgbColor(0, 0, 0, 16)
    warnings = [message for level, message in log_messages if level == "WARNING"]
    assert len(warnings) == 2


def test_signed_param() -> None:
    state = parse_url_state({"hex": "FFFF0000", "signed": "yes"})
    assert state.signed is True
    assert state.int_text == "-65536"
    assert parse_url_state({"signed": "off"}).signed is False


def test_share_link_round_trips() -> None:
    state = initial_state(ArgbColor(1, 2, 3, 4), signed=True)
    assert to_query_params(state) == {"hex": "01020304", "signed": "true"}
    assert share_query_string(state) == "?hex=01020304&signed=true"
    assert parse_url_state(to_query_params(state)) == state


def test_share_link_for_unsigned_state() -> None:
    state = initial_state(ArgbColor(255, 0, 0, 255), signed=False)
    assert share_query_string(state) == "?hex=FF0000FF"


def test_repeated_params_use_last_value() -> None:
    assert parse_url_state({"hex": ["FF0000FF", "FF00FF00"]}).color == ArgbColor(255, 0, 255, 0)
    assert parse_url_state({"preset": ["Red", "Cyan"]}).color == ArgbColor(255, 0, 255, 255)
    assert parse_url_state({"signed": ["false", "true"]}).signed is True


def test_unusable_param_values_are_skipped() -> None:
    state = parse_url_state({"preset": [], "hex": 123, "int": ["16"], "signed": None})
    assert state.color == ArgbColor(0, 0, 0, 16)
    assert state.signed is False
