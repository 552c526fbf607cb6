"""Tests for processing results, aggregation and final responses."""

import pytest
from media_reply.core.base import MediaKind
from media_reply.core.output import (
    AggregatedStatus,
    ErrorResponse,
    ProcessedContent,
    ProcessingFailure,
    ResponseStatus,
    SuccessResponse,
)


class TestProcessingResult:
    """Tests for the two result shapes."""

    def test_processed_content_shape(self):
        """Test the success shape only carries content."""
        assert ProcessedContent(content="a cat").model_dump() == {"content": "a cat"}

    def test_failure_shape(self):
        """Test the failure shape only carries processed and error."""
        failure = ProcessingFailure(error="Error al procesar imagen")
        assert failure.model_dump() == {"processed": False, "error": "Error al procesar imagen"}

    def test_shapes_are_disjoint(self):
        """Test the two shapes share no field."""
        assert not set(ProcessedContent.model_fields) & set(ProcessingFailure.model_fields)

    def test_failure_processed_must_be_false(self):
        """Test a failure cannot claim to be processed."""
        with pytest.raises(ValueError):
            ProcessingFailure(processed=True, error="x")


class TestAggregatedStatus:
    """Tests for AggregatedStatus grouping."""

    def test_empty(self):
        """Test aggregating nothing."""
        status = AggregatedStatus.from_results([])
        assert status.results == {}
        assert status.messages == []

    def test_groups_by_kind_keeping_order(self):
        """Test results are grouped per kind in settle order."""
        first = ProcessedContent(content="first")
        second = ProcessingFailure(error="Error al procesar imagen")
        audio = ProcessedContent(content="hello")
        status = AggregatedStatus.from_results(
            [
                (MediaKind.AUDIO, audio),
                (MediaKind.IMAGE, first),
                (MediaKind.IMAGE, second),
            ],
            ["hi"]
        )

        assert list(status.results) == [MediaKind.IMAGE, MediaKind.AUDIO]
        assert status.results[MediaKind.IMAGE] == [first, second]
        assert status.results[MediaKind.AUDIO] == [audio]
        assert status.messages == ["hi"]

    def test_absent_kinds_are_omitted(self):
        """Test kinds with no items do not appear."""
        status = AggregatedStatus.from_results([(MediaKind.VIDEO, ProcessedContent(content="v"))])
        assert MediaKind.IMAGE not in status.results
        assert list(status.results) == [MediaKind.VIDEO]

    def test_failure_type_is_preserved(self):
        """Test union members keep their type after validation."""
        status = AggregatedStatus.from_results([(MediaKind.IMAGE, ProcessingFailure(error="e"))])
        assert isinstance(status.results[MediaKind.IMAGE][0], ProcessingFailure)

    def test_frozen(self):
        """Test the status cannot be reassigned."""
        status = AggregatedStatus.from_results([])
        with pytest.raises(Exception):
            status.messages = ["changed"]


class TestFinalResponse:
    """Tests for final response shapes."""

    def test_success_shape(self):
        """Test the success dict shape."""
        response = SuccessResponse.from_text("Hola")
        assert response.model_dump(mode="json") == {
            "status": "success",
            "response": "Hola",
            "results": {"text": {"content": "Hola"}},
        }
        assert response.status == ResponseStatus.SUCCESS

    def test_error_shape(self):
        """Test the error dict shape."""
        response = ErrorResponse(message="Error al generar respuesta final", error="boom")
        assert response.model_dump(mode="json") == {
            "status": "error",
            "message": "Error al generar respuesta final",
            "processed": True,
            "error": "boom",
        }
        assert response.status == "error"
