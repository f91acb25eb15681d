import pytest
from fastapi.testclient import TestClient

from siteplan import analyzer
from siteplan.errors import ConversionError


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("CLOUDCONVERT_API_KEY", raising=False)
    monkeypatch.delenv("SETBACK_MIN_DISTANCE", raising=False)
    import main

    return TestClient(main.app)


@pytest.fixture
def fake_conversion(monkeypatch):
    """Make conversion write the given DXF content next to the upload."""

    def install(content: bytes):
        def fake_convert(path):
            out = path.with_suffix(".dxf")
            out.write_bytes(content)
            return out

        monkeypatch.setattr(analyzer, "convert_dwg_to_dxf", fake_convert)

    return install


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert 'name="dwgFile"' in response.text


def test_rules(client):
    assert client.get("/api/rules").json() == {"min_distance": 10.0, "unit": "feet"}


def test_upload_compliant(client, fake_conversion, compliant_dxf):
    fake_conversion(compliant_dxf)

    response = client.post(
        "/upload",
        files={"dwgFile": ("site.dwg", b"AC1032", "application/octet-stream")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["filename"] == "site.dwg"
    assert body["setbackCompliance"]["compliant"] is True
    assert "17" in body["setbackCompliance"]["message"]


def test_upload_with_distance_override(client, fake_conversion, compliant_dxf):
    fake_conversion(compliant_dxf)

    response = client.post(
        "/upload",
        files={"dwgFile": ("site.dwg", b"AC1032", "application/octet-stream")},
        data={"min_distance": "18"},
    )

    assert response.status_code == 200
    assert response.json()["setbackCompliance"]["compliant"] is False


def test_upload_rejects_other_extensions(client):
    response = client.post(
        "/upload",
        files={"dwgFile": ("site.pdf", b"%PDF", "application/pdf")},
    )
    assert response.status_code == 400


def test_upload_conversion_failure(client, monkeypatch):
    def failing_convert(path):
        raise ConversionError("Conversion error: invalid API key")

    monkeypatch.setattr(analyzer, "convert_dwg_to_dxf", failing_convert)

    response = client.post(
        "/upload",
        files={"dwgFile": ("site.dwg", b"AC1032", "application/octet-stream")},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Conversion error: invalid API key"}


def test_validate_dxf_endpoint(client, encroaching_dxf):
    response = client.post(
        "/api/validate-dxf",
        files={"file": ("site.dxf", encroaching_dxf, "application/dxf")},
    )

    assert response.status_code == 200
    assert response.json()["setbackCompliance"]["compliant"] is False
    assert response.json()["diagnostics"]["building_count"] == 1


def test_validate_dxf_rejects_non_positive_override(client, compliant_dxf):
    response = client.post(
        "/api/validate-dxf",
        files={"file": ("site.dxf", compliant_dxf, "application/dxf")},
        data={"min_distance": "0"},
    )
    assert response.status_code == 400


def test_validate_dxf_empty_upload(client):
    response = client.post(
        "/api/validate-dxf",
        files={"file": ("site.dxf", b"", "application/dxf")},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Not a DXF file: upload is empty"}
