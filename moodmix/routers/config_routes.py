"""Config routes — read, partially update and reset config.json."""

from fastapi import APIRouter, Depends

from moodmix.config import DEFAULT_CONFIG, load_config, save_config
from moodmix.models.config import AppConfig, ConfigUpdate
from moodmix.state import AppState, get_state

router = APIRouter(prefix="/api", tags=["config"])


@router.get("/config", response_model=AppConfig)
async def get_config():
    return load_config()


@router.put("/config", response_model=AppConfig)
async def put_config(body: ConfigUpdate, state: AppState = Depends(get_state)):
    config = load_config()
    updates = body.model_dump(exclude_none=True)
    config.update(updates)
    save_config(config)
    state.apply_config(config)
    return config


@router.post("/config/reset", response_model=AppConfig)
async def reset_config(state: AppState = Depends(get_state)):
    save_config(dict(DEFAULT_CONFIG))
    state.apply_config(DEFAULT_CONFIG)
    return DEFAULT_CONFIG
