import json
import logging
from numbers import Integral, Real
from pathlib import Path

import numpy as np
import yaml

KINDS = {"j": ("j",), "y": ("y",), "both": ("j", "y")}


class Config:
    """Table request read from a JSON or YAML file.

    Expected layout::

        orders: [0, 1, 2]                          # or {start, stop, step}
        arguments: {start: 0.5, stop: 10, step: 0.5}
        kind: both                                 # j | y | both
        output: {file: table.csv}                  # optional
    """

    config: dict = {}

    def __init__(self, path_config: str | Path):
        if not isinstance(path_config, (str, Path)):
            raise ValueError("The config file path needs to be a string or a Path!")
        _path_config = Path(path_config)
        self.file_type = _path_config.suffix
        match self.file_type:
            case ".json":
                with open(_path_config) as data:
                    self.config = json.load(data)
            case ".yaml" | ".yml":
                with open(_path_config) as data:
                    self.config = yaml.safe_load(data)
            case _:
                raise ValueError(
                    "The provided config file needs to be a json or yaml file!"
                )
        if not isinstance(self.config, dict):
            raise ValueError(
                f"Could not read config file {path_config}. Expected a mapping at the top level."
            )
        self.path_config = _path_config

        self.log = logging.getLogger(self.__class__.__module__)
        self.__read()

    def __read(self):
        for key in ("orders", "arguments"):
            if key not in self.config:
                raise ValueError(f"The config file is missing the '{key}' entry.")

        self.orders = self.__orders(self.__sequence("orders"))
        self.arguments = np.asarray(self.__sequence("arguments"), dtype=float)

        self.kind = str(self.config.get("kind", "both")).lower()
        if self.kind not in KINDS:
            raise ValueError(
                f"Unsupported kind {self.kind!r}; expected one of {sorted(KINDS)}."
            )
        self.kinds = KINDS[self.kind]

        output = self.config.get("output") or {}
        file = output.get("file") if isinstance(output, dict) else output
        if file and not Path(file).is_absolute():
            file = str(self.path_config.parent / file)
        self.output_file = file or None

        self.log.info(
            "Read %d orders and %d arguments from %s",
            self.orders.size,
            self.arguments.size,
            self.path_config,
        )

    def __sequence(self, key: str):
        data = self.config[key]
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            try:
                return np.arange(data["start"], data["stop"], data["step"])
            except KeyError as err:
                raise ValueError(
                    f"'{key}' given as a range needs start, stop and step; missing {err}."
                ) from err
        if isinstance(data, Real):
            return [data]
        raise ValueError(
            f"Please provide '{key}' as a list, a single number, or the (start, stop, step) numpy.arange parameters."
        )

    @staticmethod
    def __orders(values) -> np.ndarray:
        orders = []
        for value in values:
            if isinstance(value, (bool, np.bool_)):
                raise ValueError(f"Order {value!r} is not an integer.")
            if isinstance(value, Integral):
                orders.append(int(value))
            elif isinstance(value, Real) and float(value).is_integer():
                orders.append(int(value))
            else:
                raise ValueError(f"Order {value!r} is not an integer.")
        return np.asarray(orders, dtype=np.int64)
