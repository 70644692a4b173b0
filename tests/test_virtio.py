import pytest

from coursebook.virtio import RequestType, VirtioBlockRequest


def test_flush_request_bytes():
    request = VirtioBlockRequest(request_type=RequestType.FLUSH, sector=42)
    assert request.as_bytes() == bytes([4, 0, 0, 0, 0, 0, 0, 0, 42, 0, 0, 0, 0, 0, 0, 0])


def test_default_request_is_in_and_zero():
    request = VirtioBlockRequest()
    assert request.request_type is RequestType.IN
    assert request.as_bytes() == bytes(16)


@pytest.mark.parametrize("kind", list(RequestType))
def test_round_trip(kind):
    request = VirtioBlockRequest(request_type=kind, reserved=3, sector=2**40 + 5)
    assert VirtioBlockRequest.from_bytes(request.as_bytes()) == request


def test_sector_out_of_range():
    with pytest.raises(ValueError):
        VirtioBlockRequest(sector=2**64).as_bytes()


def test_unknown_request_type():
    with pytest.raises(ValueError):
        VirtioBlockRequest(request_type=2).as_bytes()


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        VirtioBlockRequest.from_bytes(bytes(15))