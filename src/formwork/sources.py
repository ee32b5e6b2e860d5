"""Raw value sources — turn request bodies and mappings into ``(name, value)`` pairs.

Formwork itself never touches HTTP. These helpers cover the usual ways
submitted values arrive, so the result can go straight into
``Form.add_values``::

    form = Form(schema).add_values(pairs_from_body(body, content_type))

URL-encoded bodies use stdlib ``urllib.parse`` with no extra dependency.
Multipart bodies need ``python-multipart`` (``pip install formwork[multipart]``).
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable
from urllib.parse import parse_qsl

from formwork.errors import ConfigurationError
from formwork.values import Entry

logger = logging.getLogger("formwork.sources")


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``get_list`` returns all values for a key. Structurally matches the
    form and query containers of most web frameworks.
    """

    def __iter__(self) -> Iterator[str]: ...
    def get_list(self, key: str) -> list[str]: ...


def pairs_from_mapping(data: MultiValueMapping | Mapping[str, Any]) -> list[Entry]:
    """Flatten a mapping into pairs.

    Multi-valued mappings contribute every value for each key. For plain
    mappings, list and tuple values are expanded and anything else is
    converted with ``str``.
    """
    pairs: list[Entry] = []
    if isinstance(data, MultiValueMapping):
        for key in data:
            pairs.extend((key, value) for value in data.get_list(key))
        return pairs
    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, str(item)) for item in value)
        else:
            pairs.append((key, str(value)))
    return pairs


def pairs_from_urlencoded(body: bytes | str) -> list[Entry]:
    """Parse an ``application/x-www-form-urlencoded`` body, keeping blank values."""
    text = body.decode("utf-8") if isinstance(body, bytes) else body
    return parse_qsl(text, keep_blank_values=True)


def pairs_from_body(body: bytes, content_type: str) -> list[Entry]:
    """Parse a form body according to its Content-Type header.

    Raises:
        ConfigurationError: If multipart parsing is needed but
            ``python-multipart`` is not installed.
        ValueError: If content type is not a supported form encoding.
    """
    ct_lower = content_type.lower().split(";")[0].strip()

    if ct_lower == "application/x-www-form-urlencoded":
        return pairs_from_urlencoded(body)

    if ct_lower == "multipart/form-data":
        return pairs_from_multipart(body, content_type)

    msg = f"Unsupported form content type: {content_type!r}"
    raise ValueError(msg)


def pairs_from_multipart(body: bytes, content_type: str) -> list[Entry]:
    """Parse a ``multipart/form-data`` body with python-multipart.

    Text fields become pairs in submission order. File parts are skipped:
    uploads are not form values.

    Raises:
        ConfigurationError: If ``python-multipart`` is not installed.
        ValueError: If the content type has no boundary parameter.
    """
    try:
        from multipart.multipart import MultipartParser, parse_options_header
    except ImportError:
        msg = (
            "Multipart form parsing requires the 'python-multipart' package. "
            "Install it with: pip install formwork[multipart]"
        )
        raise ConfigurationError(msg) from None

    _, options = parse_options_header(content_type.encode("latin-1"))
    boundary = options.get(b"boundary")
    if boundary is None:
        msg = "Multipart form data missing boundary parameter"
        raise ValueError(msg)

    pairs: list[Entry] = []

    # Track current part state
    current_headers: dict[str, str] = {}
    current_data = bytearray()
    current_field_name: str | None = None
    current_filename: str | None = None

    def on_part_begin() -> None:
        nonlocal current_headers, current_data, current_field_name, current_filename
        current_headers = {}
        current_data = bytearray()
        current_field_name = None
        current_filename = None

    def on_part_data(data_chunk: bytes, start: int, end: int) -> None:
        current_data.extend(data_chunk[start:end])

    def on_part_end() -> None:
        if current_field_name is None:
            return
        if current_filename is not None:
            logger.debug("Skipping uploaded file in field %r", current_field_name)
            return
        pairs.append((current_field_name, current_data.decode("utf-8", errors="replace")))

    def on_header_field(hdata: bytes, start: int, end: int) -> None:
        current_headers["_pending_field"] = hdata[start:end].decode("latin-1").lower()

    def on_header_value(hdata: bytes, start: int, end: int) -> None:
        nonlocal current_field_name, current_filename
        field = current_headers.pop("_pending_field", "")
        value = hdata[start:end].decode("latin-1")
        current_headers[field] = value

        if field == "content-disposition":
            _, params = parse_options_header(value.encode("latin-1"))
            name = params.get(b"name")
            if name is not None:
                current_field_name = name.decode("utf-8")
            fname = params.get(b"filename")
            if fname is not None:
                current_filename = fname.decode("utf-8")

    callbacks: dict[str, Any] = {
        "on_part_begin": on_part_begin,
        "on_part_data": on_part_data,
        "on_part_end": on_part_end,
        "on_header_field": on_header_field,
        "on_header_value": on_header_value,
    }

    parser = MultipartParser(boundary, callbacks)
    parser.write(body)
    parser.finalize()

    return pairs
