"""
Contract ABI loading from the JSON files shipped with the package
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from swap_supply.core.exceptions import AbiLoadError


logger = logging.getLogger(__name__)

ABI_DIR = Path(__file__).resolve().parent.parent / "abis"


def load_abi(name: str, abi_dir: Optional[Path] = None) -> List[Dict[str, Any]]:
    """
    Load a contract ABI by file stem

    Accepts either a compiler artifact (``{"abi": [...]}``) or a bare list.
    """
    return list(_load_abi(name, str(abi_dir or ABI_DIR)))


@lru_cache()
def _load_abi(name: str, abi_dir: str) -> tuple:
    path = Path(abi_dir) / f"{name}.json"

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise AbiLoadError(f"ABI file not found: {path}", code="abi_not_found")
    except json.JSONDecodeError as e:
        raise AbiLoadError(f"ABI file {path} is not valid JSON: {e}", code="abi_invalid")

    abi = data.get("abi") if isinstance(data, dict) else data

    if not isinstance(abi, list):
        raise AbiLoadError(f"ABI file {path} has no 'abi' list", code="abi_invalid")

    logger.debug(f"Loaded ABI {name} ({len(abi)} entries)")
    return tuple(abi)
