import json
import uuid

from kasir.models import Category
from kasir.response import ApiResponse, Meta, created, failed, ok


def test_ok_omits_empty_members():
    assert ok("hi", None, None).to_dict() == {"status": "OK", "message": "hi"}


def test_failed_carries_error_text():
    result = failed("Bad", ValueError("boom")).to_dict()
    assert result == {"status": "FAILED", "message": "Bad", "error": "boom"}


def test_created_status():
    result = created("made", {"a": 1}).to_dict()
    assert result == {"status": "CREATED", "message": "made", "data": {"a": 1}}


def test_meta_omits_zero_values():
    assert Meta(total=5).to_dict() == {"total": 5}
    assert Meta().to_dict() == {}


def test_empty_meta_still_present():
    assert ok("list", [], Meta()).to_dict()["meta"] == {}


def test_empty_list_data_is_kept():
    assert ok("list", [], None).to_dict()["data"] == []


def test_key_order():
    response = ApiResponse("FAILED", "m", [1], "e", Meta(total=1, page=2, limit=3))
    assert list(response.to_dict()) == ["status", "message", "data", "error", "meta"]


def test_model_data_is_serialised():
    cid = uuid.uuid4()
    data = ok("one", Category(id=cid, name="Food"), None).to_dict()["data"]
    assert data["id"] == str(cid)
    assert data == Category(id=cid, name="Food").to_dict()


def test_json_response_bytes_and_headers():
    response = ok("hi", None, None).json(200)
    assert response.status_code == 200
    assert response.headers["Content-Type"] == "application/json"
    assert response.get_data() == b'{"status":"OK","message":"hi"}'


def test_json_response_round_trip():
    envelope = ok("list", [Category(name="A"), Category(name="B")], Meta(total=2, page=1, limit=1))
    response = envelope.json(201)
    assert response.status_code == 201
    assert json.loads(response.get_data()) == envelope.to_dict()


def test_json_unserialisable_data_gives_server_error():
    response = ok("bad", object(), None).json(200)
    assert response.status_code == 500


def test_text_uses_message():
    response = ok("running", None, None).text(200)
    assert response.get_data(as_text=True) == "running"
    assert response.headers["Content-Type"] == "text/plain"


def test_text_prefers_error():
    response = failed("Bad", "broken").text(400)
    assert response.status_code == 400
    assert response.get_data(as_text=True) == "broken"