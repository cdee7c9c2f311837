"""Producer/consumer checks for artifacts passed between pipeline actions.

CodePipeline matches ``input_artifacts`` to ``output_artifacts`` by name only and
reports mistakes at apply time. ``validate_artifact_chain`` catches them before
anything is submitted.

Rules:
  - an input must be produced by an action in an earlier stage, or by an action
    with a strictly lower ``run_order`` in the same stage
  - each artifact name is produced at most once per pipeline
  - Source actions take no inputs
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from codepipeline_stack.common.constants import ActionCategory
from codepipeline_stack.common.schemas import PipelineSpec

logger = logging.getLogger(__name__)


class ArtifactChainError(ValueError):
    """Raised when an action consumes an artifact nothing has produced yet."""

    def __init__(self, stage: str, action: str, artifact: str, reason: str) -> None:
        self.stage = stage
        self.action = action
        self.artifact = artifact
        self.reason = reason
        super().__init__(
            f"Invalid artifact chain: stage={stage} action={action} "
            f"artifact={artifact!r}: {reason}"
        )


@dataclass(frozen=True)
class ArtifactEdge:
    """One producer -> consumer hand-off."""

    artifact: str
    producer: str
    consumer: str


@dataclass
class ArtifactGraph:
    """Where each artifact comes from and who reads it."""

    producers: dict[str, str] = field(default_factory=dict)
    edges: list[ArtifactEdge] = field(default_factory=list)

    def consumers_of(self, artifact: str) -> list[str]:
        return [e.consumer for e in self.edges if e.artifact == artifact]

    def unconsumed(self) -> list[str]:
        """Artifacts produced but never read by a later action."""
        consumed = {e.artifact for e in self.edges}
        return [a for a in self.producers if a not in consumed]


def _qualified(stage: str, action: str) -> str:
    return f"{stage}.{action}"


def build_artifact_graph(spec: PipelineSpec) -> ArtifactGraph:
    """Walk stages in order and link every input to its producer.

    Raises:
        ArtifactChainError: on the first rule violation found.
    """
    graph = ArtifactGraph()

    for stage in spec.stages:
        # Actions sharing a run_order run in parallel, so outputs only become
        # visible to the next run_order group.
        for run_order in sorted({a.run_order for a in stage.actions}):
            group = [a for a in stage.actions if a.run_order == run_order]

            for action in group:
                if action.category == ActionCategory.SOURCE and action.input_artifacts:
                    raise ArtifactChainError(
                        stage.name,
                        action.name,
                        action.input_artifacts[0],
                        "source actions cannot take input artifacts",
                    )
                for artifact in action.input_artifacts:
                    producer = graph.producers.get(artifact)
                    if producer is None:
                        raise ArtifactChainError(
                            stage.name,
                            action.name,
                            artifact,
                            "not produced by any earlier action",
                        )
                    graph.edges.append(
                        ArtifactEdge(
                            artifact=artifact,
                            producer=producer,
                            consumer=_qualified(stage.name, action.name),
                        )
                    )

            for action in group:
                for artifact in action.output_artifacts:
                    if artifact in graph.producers:
                        raise ArtifactChainError(
                            stage.name,
                            action.name,
                            artifact,
                            f"already produced by {graph.producers[artifact]}",
                        )
                    graph.producers[artifact] = _qualified(stage.name, action.name)

    return graph


def validate_artifact_chain(spec: PipelineSpec) -> ArtifactGraph:
    """Validate the chain and return the resolved graph."""
    graph = build_artifact_graph(spec)
    logger.info(
        "Artifact chain OK: %d artifact(s), %d hand-off(s)",
        len(graph.producers),
        len(graph.edges),
    )
    for artifact in graph.unconsumed():
        logger.debug("Artifact %s is produced but never consumed", artifact)
    return graph


__all__ = [
    "ArtifactChainError",
    "ArtifactEdge",
    "ArtifactGraph",
    "build_artifact_graph",
    "validate_artifact_chain",
]
