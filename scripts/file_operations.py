import json
import numpy as np
from pathlib import Path
from datetime import datetime


def ensure_directory_exists(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)


def generate_timestamped_filename(prefix: str = "trajectory", extension: str = "npy") -> str:
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return f"{prefix}_{timestamp}.{extension}"


def save_numpy_array(array: np.ndarray, filepath: Path) -> None:
    ensure_directory_exists(filepath.parent)
    np.save(filepath, array)


def save_metrics(metrics: dict, filepath: Path) -> None:
    ensure_directory_exists(filepath.parent)
    with open(filepath, "w") as f:
        json.dump(metrics, f, indent=2, default=float)
