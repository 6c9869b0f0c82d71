"""Two-stage producer/analyzer workflow gated on a completion marker."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from ..agent import Agent
from ..errors import WorkflowStepError
from ..events import EventBus
from ..types import ProcessResult
from .base import BaseWorkflow, WorkflowType
from .markers import CompletionMarker

logger = logging.getLogger(__name__)

AnalysisPromptBuilder = Callable[[str, str], str]


class WorkflowStep(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    PRODUCING_ARTIFACT = "producing_artifact"
    ANALYZING_ARTIFACT = "analyzing_artifact"
    COMPLETED = "completed"


class ArtifactPipelineWorkflow(BaseWorkflow):
    """The producer converses with the user until it emits a marked artifact,
    which is then handed to the analyzer once.

    Input that arrives after ``COMPLETED`` opens a new exchange; the agents
    keep their conversation history until ``reset``.
    """

    def __init__(
        self,
        producer: Agent,
        analyzer: Agent,
        marker: CompletionMarker,
        build_analysis_prompt: AnalysisPromptBuilder,
        workflow_type: WorkflowType,
        workflow_id: str = "pipeline",
        event_bus: EventBus | None = None,
    ) -> None:
        super().__init__(workflow_id, [producer, analyzer], event_bus)
        self.producer = producer
        self.analyzer = analyzer
        self.marker = marker
        self.workflow_type = workflow_type
        self._build_analysis_prompt = build_analysis_prompt
        self._step = WorkflowStep.AWAITING_INPUT
        self._request: str | None = None
        self._artifact: str | None = None

    @property
    def step(self) -> WorkflowStep:
        return self._step

    @property
    def artifact(self) -> str | None:
        return self._artifact

    def reset(self) -> None:
        super().reset()
        self._step = WorkflowStep.AWAITING_INPUT
        self._request = None
        self._artifact = None

    async def _process(self, input_text: str) -> ProcessResult:
        if self._step is WorkflowStep.COMPLETED:
            self._step = WorkflowStep.AWAITING_INPUT
            self._request = None
            self._artifact = None
        if self._request is None:
            self._request = input_text

        await self._add_user_message(input_text)

        self._step = WorkflowStep.PRODUCING_ARTIFACT
        produced = await self.producer.process(input_text)
        if not produced.success:
            self._step = WorkflowStep.AWAITING_INPUT
            return produced

        message = produced.unwrap()
        await self._append(message)
        artifact = self.marker.extract(message.content)
        if artifact is None:
            # producer is still gathering details
            self._step = WorkflowStep.AWAITING_INPUT
            return produced

        self._artifact = artifact
        self._step = WorkflowStep.ANALYZING_ARTIFACT
        logger.debug("Workflow %s handing artifact to %s", self.id, self.analyzer.id)
        analysis = await self.analyzer.process(
            self._build_analysis_prompt(self._request, artifact)
        )
        self._step = WorkflowStep.COMPLETED

        if not analysis.success:
            logger.warning("Workflow %s analysis failed: %s", self.id, analysis.error)
            return ProcessResult.failure(
                WorkflowStepError(WorkflowStep.ANALYZING_ARTIFACT.value, analysis.error)
            )

        await self._append(analysis.unwrap())
        return analysis
