"""
Tests for the weight store and host transport boundary interfaces.
"""

import json

import numpy as np
import pytest
from cognicortex.errors import WeightLoadError
from cognicortex.host import ConnectionStatus, HostTransport
from cognicortex.weights import WeightStore, decode_weights
from cognicortex import CognitiveEngine


class TestWeightStore:
    """Test opaque parameter loading."""

    def test_too_small_rejected(self):
        store = WeightStore(16)

        assert store.load_bytes(b"\x00" * 1023) is False
        assert store.loaded is False
        assert len(store) == 16

    def test_not_bytes_rejected(self):
        assert WeightStore().load_bytes("not bytes" * 200) is False

    def test_grows_to_fit(self):
        """Test the buffer expands when data holds more parameters."""
        values = np.arange(300, dtype='<f4')
        store = WeightStore(10)

        assert store.load_bytes(values.tobytes())
        assert len(store) == 300
        assert np.allclose(store.weights, values)

    def test_loads_into_leading_slots(self):
        """Test smaller data fills the first slots and keeps the size."""
        store = WeightStore(1000)
        store.load_bytes(np.full(256, 2.5, dtype='<f4').tobytes())

        assert len(store) == 1000
        assert np.allclose(store.weights[:256], 2.5)
        assert np.allclose(store.weights[256:], 0.0)

    def test_trailing_partial_chunk_ignored(self):
        values = decode_weights(np.ones(256, dtype='<f4').tobytes() + b"\x01\x02")

        assert values.shape == (256,)

    def test_decode_errors(self):
        with pytest.raises(WeightLoadError):
            decode_weights(b"\x00" * 10)
        with pytest.raises(WeightLoadError):
            decode_weights(12345)

    def test_info(self):
        store = WeightStore(262144)
        info = store.info()

        assert info == {'total_parameters': 262144, 'memory_usage_mb': 1.0, 'loaded': False}


class TestHostTransport:
    """Test the host message queue."""

    def test_connect_announces_capabilities(self):
        transport = HostTransport()

        assert transport.connect("desk-1")
        assert transport.status is ConnectionStatus.CONNECTED
        assert transport.desktop_id == "desk-1"

        messages = transport.drain()
        assert len(messages) == 1
        assert messages[0].message_type == "capabilities"
        assert messages[0].priority == 1
        assert "cognitive_processing" in json.loads(messages[0].payload)

    def test_fifo_drain(self):
        transport = HostTransport()
        ids = [transport.enqueue("status", str(i)) for i in range(3)]

        messages = transport.drain()

        assert [m.id for m in messages] == ids
        assert [m.payload for m in messages] == ["0", "1", "2"]
        assert len(set(ids)) == 3
        assert transport.drain() == []

    def test_error_status(self):
        transport = HostTransport()
        transport.fail("timeout")

        assert transport.status is ConnectionStatus.ERROR
        assert transport.error == "timeout"

    def test_engine_passthrough(self):
        """Test the engine exposes the queue without touching pipeline state."""
        engine = CognitiveEngine()
        engine.connect_to_desktop("desk-2")
        engine.send_host_message("note", "{}")

        pending = json.loads(engine.get_pending_messages_json())

        assert [m['message_type'] for m in pending] == ["capabilities", "note"]
        assert engine.get_pending_messages() == []
        assert engine.state.current_task is None
