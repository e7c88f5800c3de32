import json

import pytest
import yaml

from fake_admission_review.core.request_builder import build_admission_review
from fake_admission_review.errors import ParamsError
from fake_admission_review.models import OutputFormat
from fake_admission_review.output.formatters import format_review, render_review
from fake_admission_review.utils.manifest_parser import parse_manifest

from conftest import POD_MANIFEST


@pytest.fixture
def review():
    return build_admission_review(parse_manifest(POD_MANIFEST.encode()), "update")


def test_yaml_output_round_trips(review):
    data = yaml.safe_load(format_review(review, OutputFormat.YAML))
    assert data["kind"] == "AdmissionReview"
    assert data["request"]["operation"] == "UPDATE"
    assert data["request"]["dryRun"] is True
    assert data["request"]["oldObject"]["metadata"]["name"] == "foo-old"


def test_yaml_output_is_block_style(review):
    text = format_review(review, "yaml")
    assert text.startswith("apiVersion: admission.k8s.io/v1\n")
    assert "{" not in text.splitlines()[0]


def test_json_output_indented_by_four(review):
    text = format_review(review, "json")
    assert text.startswith('{\n    "apiVersion": "admission.k8s.io/v1"')
    assert json.loads(text)["request"]["uid"] == review.request.uid


@pytest.mark.parametrize("fmt", ["table", "YAML", ""])
def test_unknown_format(review, fmt):
    with pytest.raises(ParamsError, match="unsupported output format"):
        format_review(review, fmt)


def test_render_plain(review, capsys):
    text = format_review(review, "json")
    render_review(text, OutputFormat.JSON)
    assert json.loads(capsys.readouterr().out) == json.loads(text)
