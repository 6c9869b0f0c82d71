"""Unit tests for workflows, completion markers and the workflow factory."""

from tandem.errors import LLMError, WorkflowStepError
from tandem.providers import GeminiModel
from tandem.workflow import (
    CODE_MARKER,
    RECIPE_MARKER,
    ArtifactPipelineWorkflow,
    CompletionMarker,
    RecipeCreationWorkflow,
    SimpleChatWorkflow,
    Workflow,
    WorkflowStep,
    WorkflowType,
    create_workflow,
)
from tandem.agent import Agent
from tandem.types import MessageRole
from tests.conftest import EchoToolHandler, MockModelClient, text, tool_call

RECIPE = """Here you go!

=== RECIPE START ===
RECIPE_NAME: Chickpea Curry
SERVINGS: 2
COOK_TIME: 25

INGREDIENTS:
- 1 can chickpeas

INSTRUCTIONS:
1. Simmer everything
=== RECIPE END ===

Enjoy."""

QUESTIONS = "1. How many servings?\n2. Any dietary restrictions?\n3. How much time?"


class TestCompletionMarker:
    def test_extract_includes_markers(self):
        artifact = RECIPE_MARKER.extract(RECIPE)
        assert artifact.startswith("=== RECIPE START ===")
        assert artifact.endswith("=== RECIPE END ===")
        assert "Enjoy" not in artifact

    def test_needs_both(self):
        assert not RECIPE_MARKER.contains("=== RECIPE START === only")
        assert not RECIPE_MARKER.contains("only === RECIPE END ===")

    def test_end_before_start(self):
        assert not RECIPE_MARKER.contains("=== RECIPE END === ... === RECIPE START ===")

    def test_custom_marker(self):
        marker = CompletionMarker("<<", ">>")
        assert marker.extract("a << b >> c") == "<< b >>"
        assert CODE_MARKER.contains("=== CODE START ===\nprint()\n=== CODE END ===")


class TestRecipeCreationWorkflow:
    async def test_questions_then_recipe(self):
        client = MockModelClient([
            text(QUESTIONS),
            text(RECIPE),
            text("About 450 kcal per serving."),
        ])
        wf = RecipeCreationWorkflow(client)
        assert isinstance(wf, Workflow)
        assert wf.workflow_type is WorkflowType.RECIPE_CREATION

        first = await wf.process_input("I want a vegetarian dinner")
        assert first.unwrap().content == QUESTIONS
        assert wf.step is WorkflowStep.AWAITING_INPUT
        assert len(client.calls) == 1

        second = await wf.process_input("2 servings, no restrictions, 30 minutes")
        assert second.unwrap().content == "About 450 kcal per serving."
        assert second.unwrap().produced_by == "Nutritionist Expert"
        assert wf.step is WorkflowStep.COMPLETED
        assert wf.artifact == RECIPE_MARKER.extract(RECIPE)

        analyzer_prompt = client.calls[2].prompt
        assert 'User Request: "I want a vegetarian dinner"' in analyzer_prompt
        assert "RECIPE_NAME: Chickpea Curry" in analyzer_prompt
        assert client.calls[2].system_instruction == wf.nutritionist.system_instruction

        history = wf.get_history()
        assert [m.role for m in history] == [
            MessageRole.USER, MessageRole.ASSISTANT,
            MessageRole.USER, MessageRole.ASSISTANT, MessageRole.ASSISTANT,
        ]
        assert [m.produced_by for m in history if m.role is MessageRole.ASSISTANT] == [
            "Chef Assistant", "Chef Assistant", "Nutritionist Expert",
        ]
        assert all(a.timestamp <= b.timestamp for a, b in zip(history, history[1:]))

    async def test_no_marker_analyzer_not_called(self):
        client = MockModelClient([text("=== RECIPE START === but no end")])
        wf = RecipeCreationWorkflow(client)
        result = await wf.process_input("soup")
        assert result.success
        assert wf.step is WorkflowStep.AWAITING_INPUT
        assert len(client.calls) == 1
        assert wf.nutritionist.get_history() == ()

    async def test_producer_failure(self):
        client = MockModelClient([LLMError("LLM_HTTP_ERROR", "mock", "overloaded", 503)])
        wf = RecipeCreationWorkflow(client)
        result = await wf.process_input("soup")

        assert not result.success
        assert isinstance(result.error, LLMError)
        assert wf.step is WorkflowStep.AWAITING_INPUT
        assert [m.role for m in wf.get_history()] == [MessageRole.USER]
        assert not wf.is_processing

    async def test_analyzer_failure(self):
        client = MockModelClient([
            text(RECIPE),
            LLMError("LLM_HTTP_ERROR", "mock", "overloaded", 503),
        ])
        wf = RecipeCreationWorkflow(client)
        result = await wf.process_input("curry for 2, vegan, 30 min")

        assert not result.success
        assert isinstance(result.error, WorkflowStepError)
        assert result.error.step == "analyzing_artifact"
        assert isinstance(result.error.cause, LLMError)
        assert wf.step is WorkflowStep.COMPLETED
        # chef's recipe is retained
        assert wf.get_history()[-1].content == RECIPE

    async def test_input_after_completion_starts_new_request(self):
        client = MockModelClient([
            text(RECIPE), text("analysis one"),
            text(QUESTIONS),
        ])
        wf = RecipeCreationWorkflow(client)
        await wf.process_input("curry")
        assert wf.step is WorkflowStep.COMPLETED

        await wf.process_input("now a dessert")
        assert wf.step is WorkflowStep.AWAITING_INPUT
        assert wf.artifact is None

    async def test_reset(self):
        client = MockModelClient([text(RECIPE), text("analysis")])
        wf = RecipeCreationWorkflow(client)
        await wf.process_input("curry")
        wf.reset()

        assert wf.get_history() == ()
        assert wf.chef.get_history() == ()
        assert wf.nutritionist.get_history() == ()
        assert wf.step is WorkflowStep.AWAITING_INPUT
        assert wf.artifact is None

    async def test_set_model_fans_out(self):
        wf = RecipeCreationWorkflow(MockModelClient())
        wf.set_model(GeminiModel.GEMINI_2_5_FLASH)
        assert wf.chef.model == "gemini-2.5-flash"
        assert wf.nutritionist.model == "gemini-2.5-flash"

    async def test_processing_events(self):
        wf = RecipeCreationWorkflow(MockModelClient([text(QUESTIONS)]))
        flags = []
        wf.event_bus.on(
            "processing_changed",
            lambda e: flags.append(e.is_processing) if e.source == wf.id else None,
        )
        await wf.process_input("hi")
        assert flags == [True, False]


class TestArtifactPipelineWorkflow:
    async def test_code_review_pipeline(self):
        code = "=== CODE START ===\nLANGUAGE: python\n\nprint('hi')\n=== CODE END ==="
        client = MockModelClient([text(code), text("Looks fine.")])
        coder = Agent(client, agent_id="coder", display_name="Coder")
        reviewer = Agent(client, agent_id="reviewer", display_name="Reviewer")
        wf = ArtifactPipelineWorkflow(
            coder, reviewer, CODE_MARKER,
            build_analysis_prompt=lambda request, artifact: f"Review for {request}:\n{artifact}",
            workflow_type=WorkflowType.SIMPLE_CHAT,
        )
        result = await wf.process_input("hello world script")
        assert result.unwrap().content == "Looks fine."
        assert client.calls[1].prompt == f"Review for hello world script:\n{code}"


class TestSimpleChatWorkflow:
    async def test_pass_through(self):
        client = MockModelClient([text(RECIPE)])
        agent = Agent(client, agent_id="a", display_name="A")
        wf = SimpleChatWorkflow(agent)
        result = await wf.process_input("recipe please")

        assert result.unwrap().content == RECIPE
        assert len(client.calls) == 1
        assert [m.content for m in wf.get_history()] == ["recipe please", RECIPE]

    async def test_failure(self):
        client = MockModelClient([LLMError("LLM_TRANSPORT_ERROR", "mock", "offline")])
        wf = SimpleChatWorkflow(Agent(client, agent_id="a", display_name="A"))
        result = await wf.process_input("hi")
        assert not result.success
        assert len(wf.get_history()) == 1

    async def test_reset(self):
        client = MockModelClient([text("hey")])
        agent = Agent(client, agent_id="a", display_name="A")
        wf = SimpleChatWorkflow(agent)
        await wf.process_input("hi")
        wf.reset()
        assert wf.get_history() == ()
        assert agent.get_history() == ()


class TestCreateWorkflow:
    async def test_recipe(self):
        wf = create_workflow(WorkflowType.RECIPE_CREATION, MockModelClient())
        assert isinstance(wf, RecipeCreationWorkflow)

    async def test_simple_chat_from_string(self):
        wf = create_workflow("simple_chat", MockModelClient(), handlers=[EchoToolHandler()])
        assert isinstance(wf, SimpleChatWorkflow)
        assert wf.agent.id == "chat-agent"
        assert [h.name for h in wf.agent.handlers] == ["echo"]

    async def test_model_applied(self):
        wf = create_workflow(
            WorkflowType.RECIPE_CREATION, MockModelClient(), model=GeminiModel.GEMINI_1_5_FLASH
        )
        assert wf.chef.model == "gemini-1.5-flash"

    async def test_agent_events_reach_workflow_bus(self):
        wf = create_workflow(
            WorkflowType.SIMPLE_CHAT, MockModelClient([text("ok")]), handlers=[]
        )
        sources = []
        wf.event_bus.on("message_added", lambda e: sources.append(e.source))
        await wf.process_input("hi")
        assert sources == ["chat-workflow", "chat-agent", "chat-agent", "chat-workflow"]

    async def test_tool_events_name_the_agent_on_workflow_bus(self):
        client = MockModelClient([tool_call("echo", message="hi"), text("said hi")])
        wf = create_workflow(WorkflowType.SIMPLE_CHAT, client, handlers=[EchoToolHandler()])
        tool_events = []
        wf.event_bus.on("tool:*", lambda e: tool_events.append((e.type, e.source)))
        await wf.process_input("say hi")
        assert tool_events == [
            ("tool:call_start", "chat-agent"),
            ("tool:call_end", "chat-agent"),
        ]
