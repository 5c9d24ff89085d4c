import pytest

from rtsptracks.transport import Transport


def test_known_transport_string():
    tr = Transport(1)
    assert tr is Transport.UDP_MULTICAST
    assert str(tr) != "unknown"
    assert str(tr) == "UDP-multicast"


def test_unknown_transport_string():
    tr = Transport(15)
    assert str(tr) == "unknown"
    assert int(tr) == 15


@pytest.mark.parametrize(
    "transport, label",
    [(Transport.UDP, "UDP"), (Transport.UDP_MULTICAST, "UDP-multicast"), (Transport.TCP, "TCP")],
)
def test_labels(transport, label):
    assert str(transport) == label


def test_values_are_ordered():
    assert [int(t) for t in (Transport.UDP, Transport.UDP_MULTICAST, Transport.TCP)] == [0, 1, 2]
    assert Transport(2) is Transport.TCP


def test_non_integer_rejected():
    with pytest.raises(ValueError):
        Transport("tcp")