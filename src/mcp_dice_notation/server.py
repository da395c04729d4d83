from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .config import DM_SCOPE, ScopeConfigStore, settings
from .dice import evaluate, flip_coin as _flip_coin
from .errors import DiceError
from .formatting import format_coin, format_result


logger = logging.getLogger(__name__)

mcp = FastMCP("mcp-dice-notation")
store = ScopeConfigStore()


@mcp.tool()
def roll_dice(notation: str, scope: str = DM_SCOPE) -> dict[str, Any]:
    """Roll dice from standard notation.

    Input: notation like 2d6, 4d6+2, 4d6k3, 10d10!, 6d10>7, 3d6ro<2 or 4dF;
    scope selects the per-server settings (default: direct messages).
    Output: narration plus the structured roll, or a user-facing error.
    """

    max_dice = store.get(scope, "max_dice")
    show_threshold = store.get(scope, "show_individual")

    try:
        result = evaluate(notation, max_dice)
    except DiceError as e:
        logger.info("Rejected dice notation %r in scope %s: [%s]", notation, scope, e.code)
        return {"ok": False, "code": e.code, "error": str(e)}
    except Exception:
        logger.exception("Error executing dice roll %r in scope %s", notation, scope)
        raise ValueError("An error occurred while rolling dice.") from None

    logger.info("Rolled %s in scope %s: %d", result.notation, scope, result.modified_total)
    return {
        "ok": True,
        "narration": format_result(result, show_threshold),
        "result": result.to_dict(),
    }


@mcp.tool()
def flip_coin() -> str:
    """Flip a coin (heads or tails)."""

    return format_coin(_flip_coin())


@mcp.tool()
def get_dice_config(scope: str = DM_SCOPE) -> dict[str, int]:
    """Show the dice settings in effect for a scope."""

    return store.snapshot(scope)


@mcp.tool()
def set_dice_config(scope: str, key: str, value: int) -> dict[str, int]:
    """Change a dice setting (max_dice or show_individual) for a scope."""

    store.set(scope, key, value)
    return store.snapshot(scope)


@mcp.tool()
def reset_dice_config(scope: str, key: str) -> dict[str, int]:
    """Restore a dice setting (max_dice or show_individual) to its default for a scope."""

    store.reset(scope, key)
    return store.snapshot(scope)


def run() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
