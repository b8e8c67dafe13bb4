from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from chartnav.charts import BarChart, Histogram, ScatterPlot
from chartnav.data import InMemoryDatasets


def _demo_provider(seed: int = 3) -> InMemoryDatasets:
    rng = np.random.default_rng(seed)
    species = ("setosa", "versicolor", "virginica", "hybrid")
    rows = []
    for _ in range(150):
        kind = species[min(3, int(rng.integers(0, 10)) // 3)]
        length = 4.0 + 0.8 * species.index(kind) + rng.normal(0.0, 0.4)
        width = 2.0 + 0.3 * length + rng.normal(0.0, 0.25)
        rows.append((kind, round(float(length), 2), round(float(width), 2)))
    provider = InMemoryDatasets()
    provider.register("flowers", ["species", "sepal_length", "sepal_width"], rows)
    return provider


def render_demo_frames() -> dict[str, np.ndarray]:
    provider = _demo_provider()
    frames: dict[str, np.ndarray] = {}

    bar = BarChart(provider, "flowers", other_fraction=0.25)
    bar.navigator.on_zoom_in_click()
    frames["bar"] = bar.render()

    hist = Histogram(provider, "flowers")
    frames["histogram"] = hist.render()
    # Zoom twice and drag the X thumb to the left.
    hist.navigator.dispatch("zoom_in")
    hist.navigator.dispatch("zoom_in")
    hist.navigator.dispatch("pointer_down", {"x": 225, "y": 392})
    hist.navigator.dispatch("pointer_move", {"x": 160, "y": 392})
    hist.navigator.dispatch("pointer_up", {"x": 160, "y": 392})
    frames["histogram_panned"] = hist.render()

    scatter = ScatterPlot(provider, "flowers")
    scatter.navigator.on_zoom_in_click()
    frames["scatter"] = scatter.render()
    return frames


def _save_rgba(path: Path, frame: np.ndarray) -> None:
    Image.fromarray(frame).save(path)


def main() -> None:
    out_dir = Path(__file__).resolve().parent / "out"
    out_dir.mkdir(parents=True, exist_ok=True)
    for name, frame in render_demo_frames().items():
        path = out_dir / f"chartnav_{name}.png"
        _save_rgba(path, frame)
        print(f"wrote {path}")


if __name__ == "__main__":
    main()
