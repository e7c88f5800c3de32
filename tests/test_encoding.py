import json

import pytest

from fake_admission_review.errors import ManifestError, SerializationError
from fake_admission_review.utils.encoding import dump_json, load_yaml, to_json_compatible, yaml_to_json
from fake_admission_review.utils.manifest_parser import parse_manifest


def test_yaml_to_json_is_compact():
    raw = b"apiVersion: v1\nkind: Pod\nmetadata:\n  name: foo\n"
    assert yaml_to_json(raw) == b'{"apiVersion":"v1","kind":"Pod","metadata":{"name":"foo"}}'


def test_timestamps_kept_as_written():
    raw = b"at: 2001-12-14 21:59:43.10\nt2: 2024-01-01T00:00:00.5Z\nday: 2024-01-02\n"
    assert json.loads(yaml_to_json(raw)) == {
        "at": "2001-12-14 21:59:43.10",
        "t2": "2024-01-01T00:00:00.5Z",
        "day": "2024-01-02",
    }


def test_non_string_keys_are_stringified():
    raw = b"data:\n  1: one\n  true: yes-value\n"
    assert json.loads(yaml_to_json(raw)) == {"data": {"1": "one", "true": "yes-value"}}


def test_manifest_fields_keep_distinct_keys():
    manifest = parse_manifest(b"apiVersion: v1\nkind: ConfigMap\ndata:\n  1: one\n  true: yes-value\n")
    assert manifest.fields["data"] == {"1": "one", "true": "yes-value"}


def test_colliding_keys_rejected():
    raw = b"data:\n  1: int-key\n  '1': str-key\n"
    with pytest.raises(SerializationError, match="both map to"):
        yaml_to_json(raw)
    with pytest.raises(ManifestError, match="both map to"):
        parse_manifest(b"apiVersion: v1\nkind: ConfigMap\n" + raw)


def test_repeated_key_keeps_last_value():
    assert load_yaml(b"a: 1\na: 2\n") == {"a": 2}


def test_merge_key_override():
    raw = b"base: &b {x: 1, y: 2}\nderived:\n  <<: *b\n  y: 3\n"
    assert json.loads(yaml_to_json(raw))["derived"] == {"x": 1, "y": 3}


def test_binary_becomes_base64():
    raw = b"data: !!binary aGVsbG8=\n"
    assert json.loads(yaml_to_json(raw)) == {"data": "aGVsbG8="}


def test_unicode_is_kept():
    assert yaml_to_json("name: café\n".encode()) == '{"name":"café"}'.encode()


@pytest.mark.parametrize("raw", [b"value: .nan\n", b"value: .inf\n"])
def test_non_finite_floats_rejected(raw):
    with pytest.raises(SerializationError):
        yaml_to_json(raw)


def test_dump_json_rejects_unknown_types():
    with pytest.raises(SerializationError):
        dump_json({"value": object()})


def test_self_referencing_alias_rejected():
    with pytest.raises(SerializationError, match="recursive alias"):
        yaml_to_json(b"data: &a\n  - *a\n")


def test_shared_alias_is_expanded():
    raw = b"base: &b [1, 2]\ncopy: *b\n"
    assert json.loads(yaml_to_json(raw)) == {"base": [1, 2], "copy": [1, 2]}


def test_alias_fan_out_is_bounded():
    leaf = ["lol"] * 10
    tree = leaf
    for _ in range(5):
        tree = [tree] * 10
    with pytest.raises(SerializationError, match="more than 1000 values"):
        to_json_compatible({"lol": tree}, max_nodes=1000)
