"""Test document upload, download and deletion."""

from conftest import create_client, portal_login
from soapdesk.config import settings
from soapdesk.features.documents.service import document_service
from soapdesk.services.file_storage import sanitize_filename


def stored_files():
    return [p for p in document_service.storage.root.rglob("*") if p.is_file()]


async def upload(http, provider, content=b"%PDF-1.4 worksheet", filename="worksheet.pdf", **form):
    response = await http.post(
        "/api/documents",
        files={"file": (filename, content, "application/pdf")},
        data=form,
        headers=provider.headers,
    )
    return response


async def test_upload_download_delete(client, provider_a):
    sarah = await create_client(client, provider_a)
    response = await upload(
        client, provider_a, client_id=sarah["id"], category="homework", shared_with_client="true"
    )
    assert response.status_code == 201, response.text
    document = response.json()
    assert document["name"] == "worksheet.pdf"
    assert document["size"] == len(b"%PDF-1.4 worksheet")
    assert document["mime_type"] == "application/pdf"
    assert document["shared_with_client"] is True
    assert "storage_key" not in document
    assert len(stored_files()) == 1

    url = f"/api/documents/{document['id']}"
    response = await client.get(f"{url}/download", headers=provider_a.headers)
    assert response.status_code == 200
    assert response.content == b"%PDF-1.4 worksheet"
    assert 'filename="worksheet.pdf"' in response.headers["content-disposition"]

    assert (await client.delete(url, headers=provider_a.headers)).status_code == 204
    assert (await client.get(url, headers=provider_a.headers)).status_code == 404
    assert stored_files() == []


async def test_download_keeps_non_ascii_filename(client, provider_a):
    sarah = await create_client(client, provider_a)
    portal = await portal_login(client, provider_a, sarah["id"], "sarah@example.com")
    document = (await upload(
        client, provider_a, content=b"data", filename="résumé 日本.pdf",
        client_id=sarah["id"], shared_with_client="true",
    )).json()
    assert document["original_name"] == "résumé 日本.pdf"

    for url, caller in [
        (f"/api/documents/{document['id']}/download", provider_a),
        (f"/api/portal/documents/{document['id']}/download", portal),
    ]:
        response = await client.get(url, headers=caller.headers)
        assert response.status_code == 200
        assert response.content == b"data"
        disposition = response.headers["content-disposition"]
        assert disposition.isascii()
        assert "filename*=utf-8''r%C3%A9sum%C3%A9%20%E6%97%A5%E6%9C%AC.pdf" in disposition


async def test_document_without_client_is_never_shared(client, provider_a):
    document = (await upload(client, provider_a, shared_with_client="true")).json()
    assert document["client_id"] is None
    assert document["shared_with_client"] is False


async def test_upload_validation(client, provider_a, monkeypatch):
    response = await upload(client, provider_a, content=b"")
    assert response.status_code == 400
    assert response.json()["message"] == "Uploaded file is empty"

    response = await upload(client, provider_a, category="taxes")
    assert response.status_code == 400
    assert response.json()["field"] == "category"

    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 1)
    response = await upload(client, provider_a, content=b"x" * (1024 * 1024 + 1))
    assert response.status_code == 400
    assert response.json()["message"] == "File size exceeds 1MB limit"

    assert stored_files() == []


async def test_upload_for_foreign_client_is_forbidden(client, provider_a, provider_b):
    sarah = await create_client(client, provider_a)
    response = await upload(client, provider_b, client_id=sarah["id"])
    assert response.status_code == 403
    assert stored_files() == []


async def test_documents_are_isolated(client, provider_a, provider_b):
    document = (await upload(client, provider_a)).json()
    url = f"/api/documents/{document['id']}"

    assert (await client.get("/api/documents", headers=provider_b.headers)).json() == []
    assert (await client.get(f"{url}/download", headers=provider_b.headers)).status_code == 403
    assert (await client.delete(url, headers=provider_b.headers)).status_code == 403
    assert len(stored_files()) == 1


async def test_update_metadata(client, provider_a):
    document = (await upload(client, provider_a)).json()
    response = await client.put(
        f"/api/documents/{document['id']}",
        json={"name": "CBT worksheet", "description": "Thought record"},
        headers=provider_a.headers,
    )
    assert response.status_code == 200
    assert response.json()["name"] == "CBT worksheet"
    assert response.json()["original_name"] == "worksheet.pdf"


def test_sanitize_filename():
    test_cases = [
        ("report.pdf", "report.pdf"),
        ("../../etc/passwd", "passwd"),
        ("my scan (1).png", "my_scan__1_.png"),
        ("..", None),
        (None, None),
    ]
    for original, expected in test_cases:
        result = sanitize_filename(original)
        if expected is None:
            assert len(result) == 32
        else:
            assert result == expected, original
