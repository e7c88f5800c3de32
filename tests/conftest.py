from pathlib import Path

import pytest

POD_MANIFEST = """\
apiVersion: v1
kind: Pod
metadata:
  name: foo
  namespace: team-a
  labels:
    app: web
spec:
  containers:
    - name: web
      image: nginx:1.27
"""

DEPLOYMENT_MANIFEST = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: api
spec:
  replicas: 2
  template:
    metadata:
      labels:
        app: api
    spec:
      containers:
        - name: api
          image: example/api:2.0
"""


@pytest.fixture
def write_manifest(tmp_path: Path):
    def _write(text: str, name: str = "manifest.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def pod_file(write_manifest) -> Path:
    return write_manifest(POD_MANIFEST, "pod.yaml")
