from collections.abc import Iterable
from pydantic import BaseModel, ConfigDict, Field
from media_reply.core.base.media_kind import MediaKind
from media_reply.core.output.result import ProcessingResult

class AggregatedStatus(BaseModel):
    """
    All per-media results of one message, grouped by kind, plus the raw text messages.

    Built once after every media item has settled and never mutated afterwards.

    Attributes:
        results (dict[MediaKind, list[ProcessingResult]]): Results per media kind. Kinds without items are absent.
        messages (list[str]): The user's text messages, unchanged.
    """
    model_config = ConfigDict(frozen=True)

    results: dict[MediaKind, list[ProcessingResult]] = Field(default_factory=dict)
    messages: list[str] = Field(default_factory=list)

    @classmethod
    def from_results(cls, settled: Iterable[tuple[MediaKind, ProcessingResult]], messages: Iterable[str] = ()) -> "AggregatedStatus":
        """
        Group settled (kind, result) pairs by kind.

        Args:
            settled (Iterable[tuple[MediaKind, ProcessingResult]]): The results, in the order they should be reported.
            messages (Iterable[str]): The user's text messages.

        Returns:
            AggregatedStatus: The grouped status; kinds follow MediaKind order.
        """
        settled = list(settled)
        results = {
            kind: [result for result_kind, result in settled if result_kind == kind]
            for kind in MediaKind
        }
        return cls(
            results={kind: items for kind, items in results.items() if items},
            messages=list(messages)
        )
