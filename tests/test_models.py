import pytest

from ir_learner.api.models import (
    LearnRequest,
    LearnType,
    Thing,
    clear_id,
    command_id,
    learn_id,
    parse_things,
)


def test_parse_things_keeps_server_order_and_falls_back_to_uid():
    things = parse_things({"dev:1": "Living Room AC", "dev:2": None})

    assert [t.uid for t in things] == ["dev:1", "dev:2"]
    assert things[0].display_label == "Living Room AC"
    assert things[1].display_label == "dev:2"


def test_empty_label_is_shown_as_is():
    # Only a missing label falls back to the uid
    assert Thing("abc", "").display_label == ""


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "things",
        None,
        {"abc": 5},
        {"": "no uid"},
    ],
)
def test_parse_things_rejects_malformed_payloads(payload):
    with pytest.raises(ValueError):
        parse_things(payload)


def test_control_ids_derive_from_uid():
    assert command_id("abc") == "command-abc"
    assert learn_id("abc") == "learnir-abc"
    assert learn_id("abc", LearnType.IR) == "learnir-abc"
    assert clear_id("abc") == "clear-abc"


def test_learn_request_query_params_in_wire_order():
    request = LearnRequest(thing="abc", command="cmd1")

    assert list(request.query_params().items()) == [
        ("thing", "abc"),
        ("command", "cmd1"),
        ("type", "ir"),
    ]
