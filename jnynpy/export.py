import _pickle
import bz2
import json
import logging
from pathlib import Path

import pandas as pd
import yaml
from pydantic import BaseModel, Field, model_validator
from scipy.io import savemat
from typing_extensions import Self

log = logging.getLogger(__name__)


class BesselTable(BaseModel):
    """Values of ``J_n`` and/or ``Y_n`` on an order-by-argument grid.

    ``j[i][k]`` (and ``y[i][k]``) holds the value at ``orders[i]`` and
    ``arguments[k]``; a kind that was not requested is left empty.
    """

    orders: list[int] = Field(default=[])
    arguments: list[float] = Field(default=[])
    kind: str = Field(default="both", pattern=r"^(j|y|both)$")
    j: list[list[float]] = Field(default=[])
    y: list[list[float]] = Field(default=[])

    @model_validator(mode="after")
    def grid_shape(self) -> Self:
        shape = (len(self.orders), len(self.arguments))
        for name in ("j", "y"):
            values = getattr(self, name)
            if not values:
                continue
            if len(values) != shape[0] or any(len(row) != shape[1] for row in values):
                raise ValueError(
                    f"Values of '{name}' do not match the {shape[0]} x {shape[1]} order/argument grid"
                )
        return self

    def to_frame(self) -> pd.DataFrame:
        """Long-format table with one row per ``(order, x)`` pair."""

        rows = {
            "order": [n for n in self.orders for _ in self.arguments],
            "x": [x for _ in self.orders for x in self.arguments],
        }
        if self.j:
            rows["jn"] = [value for row in self.j for value in row]
        if self.y:
            rows["yn"] = [value for row in self.y for value in row]
        return pd.DataFrame(rows)

    def save(self, filename: str | Path) -> None:
        if isinstance(filename, str):
            filename = Path(filename)

        match filename.suffix:
            case ".json":
                with open(filename, "w") as f:
                    json.dump(self.model_dump(), f, indent=4)
            case ".yml" | ".yaml":
                with open(filename, "w") as f:
                    yaml.dump(self.model_dump(), f)
            case ".csv":
                self.to_frame().to_csv(filename, index=False)
            case ".pkl":
                with open(filename, "wb") as f:
                    _pickle.dump(self.model_dump(), f)
            case ".bz2":
                with bz2.BZ2File(filename, "w") as outfile:
                    _pickle.dump(self.model_dump(), outfile)
            case ".mat":
                savemat(filename, {k: v for k, v in self.model_dump().items() if v != []})
            case _:
                raise ValueError(f"Unknown file extension {filename.suffix}")
        log.info("Saved %s table to %s", self.kind, filename)
