"""HTTP routes for the Age of Wars API."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from ageofwars.config import Settings
from ageofwars.domain.advantage import ADVANTAGES
from ageofwars.domain.battle import ArmySizeError, BattleSimulator, Exhausted
from ageofwars.domain.notation import parse_army
from ageofwars.domain.rules_config import MAX_BATTLE_SIZE

logger = logging.getLogger(__name__)

router = APIRouter()


def get_settings_dep(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:  # pragma: no cover - create_app always sets it
        raise RuntimeError("API settings not initialised")
    return settings


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]


class ArrangementRequest(BaseModel):
    attacker: str = Field(description="Own army, e.g. 'Militia#10;Spearmen#20'")
    defender: str = Field(description="Opponent army in fixed battle order")
    battle_size: int | None = Field(
        default=None,
        ge=1,
        le=MAX_BATTLE_SIZE,
        description="Platoons per army; defaults to the configured size",
    )


class ArrangementResponse(BaseModel):
    found: bool
    arrangement: str | None
    opponent: str
    wins: int
    threshold: int
    orderings_tried: int


@router.get("/health")
async def health(settings: SettingsDep) -> dict[str, object]:
    return {"status": "ok", "battle_size": settings.battle_size}


@router.get("/advantages")
async def advantages() -> dict[str, list[str]]:
    """Expose the class-advantage table for clients."""

    return {
        str(unit_class): sorted(str(target) for target in targets)
        for unit_class, targets in ADVANTAGES.items()
    }


@router.post("/arrangements", response_model=ArrangementResponse)
def find_arrangement(request: ArrangementRequest, settings: SettingsDep) -> ArrangementResponse:
    # sync handler: FastAPI runs it in the threadpool, off the event loop
    attacker = parse_army(request.attacker)
    defender = parse_army(request.defender)
    battle_size = request.battle_size or settings.battle_size
    simulator = BattleSimulator(attacker, defender, battle_size)
    try:
        result = simulator.find_winning_arrangement()
    except ArmySizeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc

    if isinstance(result, Exhausted):
        logger.info("No winning arrangement for %s", attacker)
        return ArrangementResponse(
            found=False,
            arrangement=None,
            opponent=str(defender),
            wins=0,
            threshold=simulator.threshold,
            orderings_tried=result.orderings_tried,
        )
    return ArrangementResponse(
        found=True,
        arrangement=str(result.arrangement),
        opponent=str(defender),
        wins=result.wins,
        threshold=simulator.threshold,
        orderings_tried=result.orderings_tried,
    )
