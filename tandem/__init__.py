"""
Tandem - conversational agents with tool calling and multi-agent workflows
=========================================================================

- **Agent** (`tandem.agent`): one conversation, one model client, at most one
  tool round-trip per turn. Presets: chat (GitHub tools), chef, nutritionist, coder.
- **Tools** (`tandem.tools`): `ToolHandler`s behind a `ToolCallBridge` that
  routes, coerces arguments and never raises.
- **Workflows** (`tandem.workflow`): `SimpleChatWorkflow` and the chef ->
  nutritionist `RecipeCreationWorkflow`.
- **Providers** (`tandem.providers`): `GeminiClient` on the OpenAI-compatible endpoint.

```python
from tandem import GeminiClient, WorkflowType, create_workflow

workflow = create_workflow(WorkflowType.RECIPE_CREATION, GeminiClient())
result = await workflow.process_input("Something quick with chickpeas")
print(result.unwrap().content)
```
"""

from .agent import Agent, AgentState
from .config import AgentConfig, ClientConfig, GitHubConfig
from .errors import TandemError
from .events import EventBus
from .providers import GeminiClient, GeminiModel
from .types import Message, MessageRole, ProcessResult
from .workflow import WorkflowType, create_workflow

__all__ = [
    "Agent",
    "AgentState",
    "AgentConfig",
    "ClientConfig",
    "GitHubConfig",
    "TandemError",
    "EventBus",
    "GeminiClient",
    "GeminiModel",
    "Message",
    "MessageRole",
    "ProcessResult",
    "WorkflowType",
    "create_workflow",
]
