import json
from pathlib import Path

import pytest

from exif_sidecar.core import record_codec
from exif_sidecar.errors import InvalidArgumentError, RecordFormatError, SidecarIOError
from exif_sidecar.models import MANDATORY_FIELDS, MetadataRecord


def _full_record() -> MetadataRecord:
    return MetadataRecord(
        filename="CAM18839.jpg",
        size=1164980,
        created_time="2020-08-13T10:57:06.773358405Z",
        modified_time="2020-08-13T10:57:06.773358405Z",
        orientation="1",
        capture_time="2020-08-09T12:58:32",
        camera_model="EOS 5D Mark IV",
        camera_serial="025021000535",
    )


EXPECTED_JSON = """{
  "filename": "CAM18839.jpg",
  "size": 1164980,
  "created_time": "2020-08-13T10:57:06.773358405Z",
  "modified_time": "2020-08-13T10:57:06.773358405Z",
  "orientation": "1",
  "capture_time": "2020-08-09T12:58:32",
  "camera_model": "EOS 5D Mark IV",
  "camera_serial": "025021000535"
}"""


def test_serialize_record_pretty_printed() -> None:
    assert record_codec.serialize_record(_full_record()) == EXPECTED_JSON


def test_deserialize_record() -> None:
    assert record_codec.deserialize_record(EXPECTED_JSON) == _full_record()


def test_roundtrip_with_empty_optional_fields() -> None:
    record = MetadataRecord(
        filename="a.jpg",
        size=0,
        created_time="1969-12-31T23:59:58.500000000Z",
        modified_time="2020-08-14T00:04:05.000000000Z",
        camera_model="X100V",
    )
    assert record_codec.deserialize_record(record_codec.serialize_record(record)) == record


def test_empty_orientation_is_omitted() -> None:
    record = MetadataRecord(
        filename="a.jpg",
        size=10,
        created_time="2020-08-13T10:57:06.773358405Z",
        modified_time="2020-08-13T10:57:06.773358405Z",
        capture_time="2019-07-26 13:25:33",
    )
    data = json.loads(record_codec.serialize_record(record))
    assert "orientation" not in data
    assert "camera_model" not in data
    assert "camera_serial" not in data
    assert data["capture_time"] == "2019-07-26 13:25:33"


def test_missing_optional_fields_become_empty() -> None:
    text = json.dumps(
        {
            "filename": "a.jpg",
            "size": 10,
            "created_time": "2020-08-13T10:57:06.773358405Z",
            "modified_time": "2020-08-13T10:57:06.773358405Z",
        }
    )
    record = record_codec.deserialize_record(text)
    assert record.orientation == ""
    assert record.capture_time == ""
    assert record.camera_model == ""
    assert record.camera_serial == ""


@pytest.mark.parametrize("field_name", MANDATORY_FIELDS)
def test_missing_mandatory_field_is_rejected(field_name: str) -> None:
    data = json.loads(EXPECTED_JSON)
    del data[field_name]
    with pytest.raises(RecordFormatError):
        record_codec.deserialize_record(json.dumps(data))


@pytest.mark.parametrize("size", [-1, 2**64, "10", True, 1.5])
def test_invalid_size_is_rejected(size) -> None:
    data = json.loads(EXPECTED_JSON)
    data["size"] = size
    with pytest.raises(RecordFormatError):
        record_codec.deserialize_record(json.dumps(data))


def test_non_string_field_is_rejected() -> None:
    data = json.loads(EXPECTED_JSON)
    data["orientation"] = 1
    with pytest.raises(RecordFormatError):
        record_codec.deserialize_record(json.dumps(data))


@pytest.mark.parametrize("text", ["{", "[]", "null", ""])
def test_malformed_document_is_rejected(text: str) -> None:
    with pytest.raises(RecordFormatError):
        record_codec.deserialize_record(text)


def test_unknown_keys_are_ignored() -> None:
    data = json.loads(EXPECTED_JSON)
    data["lens"] = "EF24-70mm"
    assert record_codec.deserialize_record(json.dumps(data)) == _full_record()


def test_non_ascii_kept_verbatim() -> None:
    record = MetadataRecord(
        filename="相片/IMG_0001.jpg",
        size=1,
        created_time="2020-08-13T10:57:06.773358405Z",
        modified_time="2020-08-13T10:57:06.773358405Z",
    )
    text = record_codec.serialize_record(record)
    assert '"filename": "相片/IMG_0001.jpg"' in text


def test_end_to_end_record_serialization() -> None:
    record = MetadataRecord(
        filename="JAM19896.jpg",
        size=953458,
        created_time="2020-08-25T02:38:14.000000000Z",
        modified_time="2020-08-14T00:04:05.000000000Z",
        orientation="row 0 at top and column 0 at left",
        capture_time="2019-07-26 13:25:33",
        camera_model="Canon EOS 5D Mark IV",
        camera_serial="025021000537",
    )
    expected = {
        "capture_time": "2019-07-26 13:25:33",
        "camera_model": "Canon EOS 5D Mark IV",
        "camera_serial": "025021000537",
        "created_time": "2020-08-25T02:38:14.000000000Z",
        "filename": "JAM19896.jpg",
        "modified_time": "2020-08-14T00:04:05.000000000Z",
        "orientation": "row 0 at top and column 0 at left",
        "size": 953458,
    }
    assert json.loads(record_codec.serialize_record(record)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("AB.jpeg", "AB.json"),
        ("AB.NEW.jpeg", "AB.NEW.json"),
        ("AB.JPG", "AB.json"),
        ("AB.JPEG", "AB.json"),
        ("photos/Trip.jpg", "photos/Trip.json"),
    ],
)
def test_generate_output_file(source: str, expected: str) -> None:
    assert record_codec.generate_output_file(source) == expected


def test_generate_output_file_accepts_path() -> None:
    assert record_codec.generate_output_file(Path("AB.jpg")) == "AB.json"


def test_generate_output_file_without_extension() -> None:
    with pytest.raises(InvalidArgumentError):
        record_codec.generate_output_file("README")


def test_write_and_read_record(tmp_path: Path) -> None:
    output = tmp_path / "CAM18839.json"
    output.write_text("stale", encoding="utf-8")

    written = record_codec.write_record(_full_record(), output)

    assert written == output
    assert output.read_text(encoding="utf-8") == EXPECTED_JSON
    assert record_codec.read_record(output) == _full_record()


def test_write_record_to_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(SidecarIOError) as exc_info:
        record_codec.write_record(_full_record(), tmp_path / "missing" / "out.json")
    assert isinstance(exc_info.value.cause, OSError)


def test_read_record_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SidecarIOError):
        record_codec.read_record(tmp_path / "nope.json")
