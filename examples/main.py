# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Cayley Examples Entry Point. Quaternion rotation demo.

Run from the project root:
    python -m examples.main
    python -m examples.main rotation.angle=1.5707963 field.dtype=float32
"""

import sys
import os

# Ensure project root is on path so core/functional imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import hydra
import torch
from omegaconf import DictConfig, OmegaConf

from core.field import FieldConfig
from examples.rotation import rotate, rotation, unit_cube
from log import configure, get_logger

logger = get_logger(__name__)


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Rotates the unit cube and logs where each corner lands."""
    configure(level=cfg.log.level, log_file=cfg.log.file)
    logger.debug("Config:\n%s", OmegaConf.to_yaml(cfg))

    field = FieldConfig(dtype=cfg.field.dtype, device=cfg.field.device)
    axis = field.tensor(list(cfg.rotation.axis))
    if axis.shape != (3,):
        raise ValueError(f"rotation.axis must have 3 components, got {list(cfg.rotation.axis)}")

    q = rotation(axis, cfg.rotation.angle)
    corners = unit_cube(dtype=field.dtype, device=field.device)
    rotated = rotate(corners, q, cfg.rotation.scale)

    # Clean up floating point error for clarity
    rotated = torch.round(rotated, decimals=cfg.decimals) + 0.0  # drops negative zeros

    for i, (p, pp) in enumerate(zip(corners.tolist(), rotated.tolist())):
        logger.info("%d %s -> %s", i, p, pp)


if __name__ == "__main__":
    main()
