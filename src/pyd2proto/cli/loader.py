"""Loading Pydantic models from Python source files."""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

_MODULE_NAME = "pyd2proto_user_module"


def load_models(file_path: Path) -> list[type[BaseModel]]:
    """Import a Python file and return the Pydantic models defined in it.

    Models imported into the file from elsewhere are ignored.

    Args:
        file_path: Path to Python file containing model definitions

    Returns:
        Model classes in the order they appear in the module namespace

    Raises:
        ValueError: If the file cannot be loaded as a module or raises while
            being imported
    """
    spec = importlib.util.spec_from_file_location(_MODULE_NAME, file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[_MODULE_NAME] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(_MODULE_NAME, None)
        raise ValueError(f"Could not import {file_path}: {e}") from e

    models = [
        obj
        for obj in vars(module).values()
        if inspect.isclass(obj)
        and issubclass(obj, BaseModel)
        and obj is not BaseModel
        and obj.__module__ == _MODULE_NAME
    ]
    logger.debug("Found %d models in %s", len(models), file_path)
    return models


def select_model(models: list[type[BaseModel]], name: str | None) -> type[BaseModel]:
    """Pick the model to compile.

    Args:
        models: Candidate model classes
        name: Class name to select; may be omitted when there is exactly one
            candidate

    Returns:
        Selected model class

    Raises:
        ValueError: If no model matches, or the choice is ambiguous
    """
    if name is not None:
        for model in models:
            if model.__name__ == name:
                return model
        raise ValueError(f"No model named {name}")

    if not models:
        raise ValueError("No Pydantic models found")

    if len(models) > 1:
        names = ", ".join(model.__name__ for model in models)
        raise ValueError(f"Several models found ({names}); choose one with --model")

    return models[0]
