"""
Bundled destination dataset

The JSON document is read and validated once per process; every caller
shares the same immutable Dataset instance.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from app.settings import settings
from models.catalog import Dataset
from tools.catalog import duplicate_transport_types

logger = logging.getLogger(__name__)


def load_dataset(path: Union[str, Path]) -> Dataset:
    """
    Read and validate a dataset document.

    Raises FileNotFoundError or pydantic.ValidationError; a broken dataset
    is a deployment problem and should stop startup.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    dataset = Dataset.model_validate(raw)

    for destination in dataset.destinations:
        duplicates = duplicate_transport_types(destination)
        if duplicates:
            logger.warning(
                "destination id=%s has duplicate transport types %s; first match wins",
                destination.id,
                duplicates,
            )

    logger.info(
        "loaded dataset %s: %d destinations, %d experiences",
        path.name,
        len(dataset.destinations),
        len(dataset.experiences),
    )
    return dataset


@lru_cache(maxsize=1)
def get_dataset() -> Dataset:
    return load_dataset(settings.dataset_path)
