"""Three-chapter text adventure driven by an LLM chat backend.

Chapters:
  1. Setting the scene: dice rolls pick the location, enemy and objective;
     the enemy's motivation and the combat descriptor are drawn at random.
  2. Combat: the player's strength (then speed, then magic) is compared with
     randomly rolled enemy levels. A lost fight costs 4 HP in the report.
  3. Climax: luck, then magic, decide how the story ends; otherwise the
     player faces one of the enemy leaders.

The engine never talks to the network itself. It is handed a Chat Service
(HttpChatService for real backends, EchoChatService for smoke runs) and
returns whatever prose the service produces.
"""

from .config import ApiConfiguration, load_config, save_config  # noqa: F401
from .engine import TRANSITION_NOTICE, AdventureEngine  # noqa: F401
from .errors import (  # noqa: F401
    AdventureError,
    InvalidIndexError,
    UnreachableCombatStateError,
)
from .llm import (  # noqa: F401
    ChatService,
    ChatServiceError,
    EchoChatService,
    HttpChatService,
)
from .models import (  # noqa: F401
    AdventureState,
    ChapterOutcome,
    ChatMessage,
    PlayerStats,
    Stage,
)
