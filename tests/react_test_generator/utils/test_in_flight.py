import threading

import pytest

from react_test_generator.exceptions import GenerationInProgressError
from react_test_generator.utils.in_flight import InFlightRegistry


class TestInFlightRegistry:
    """Test InFlightRegistry class."""

    def test_acquire_and_release(self):
        registry = InFlightRegistry()

        assert registry.acquire("/proj/tests/Card.test.tsx") is True
        assert registry.acquire("/proj/tests/Card.test.tsx") is False
        registry.release("/proj/tests/Card.test.tsx")
        assert registry.acquire("/proj/tests/Card.test.tsx") is True

    def test_paths_are_independent(self):
        registry = InFlightRegistry()
        registry.acquire("/proj/tests/Card.test.tsx")

        assert registry.acquire("/proj/tests/Button.test.tsx") is True

    def test_release_of_unknown_path_is_harmless(self):
        InFlightRegistry().release("/nowhere")

    def test_claim_rejects_second_holder(self):
        """Test a nested claim for the same path fails."""
        registry = InFlightRegistry()

        with registry.claim("/proj/tests/Card.test.tsx"):
            with pytest.raises(GenerationInProgressError) as exc_info:
                with registry.claim("/proj/tests/Card.test.tsx"):
                    pass

        assert exc_info.value.test_path == "/proj/tests/Card.test.tsx"
        assert not registry.is_in_flight("/proj/tests/Card.test.tsx")

    def test_claim_releases_on_error(self):
        """Test the claim is dropped when the body raises."""
        registry = InFlightRegistry()

        with pytest.raises(RuntimeError):
            with registry.claim("/proj/tests/Card.test.tsx"):
                assert registry.is_in_flight("/proj/tests/Card.test.tsx")
                raise RuntimeError("boom")

        assert not registry.is_in_flight("/proj/tests/Card.test.tsx")

    def test_only_one_thread_wins(self):
        """Test concurrent acquisitions of one path admit a single holder."""
        # Arrange
        registry = InFlightRegistry()
        barrier = threading.Barrier(8)
        wins = []

        def contend():
            barrier.wait()
            wins.append(registry.acquire("/proj/tests/Card.test.tsx"))

        threads = [threading.Thread(target=contend) for _ in range(8)]

        # Act
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Assert
        assert wins.count(True) == 1
