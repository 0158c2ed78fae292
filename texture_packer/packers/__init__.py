from typing import Dict, Type

from ..packer_types import TexturePackerAlgorithm, TexturePackerConfig
from .base_packer import Packer
from .skyline_packer import SkylineInvariantError, SkylinePacker

packers: Dict[TexturePackerAlgorithm, Type[Packer]] = {
    TexturePackerAlgorithm.SKYLINE: SkylinePacker,
}


def get_packer(config: TexturePackerConfig) -> Packer:
    """Create a packer for the algorithm selected in the config."""
    try:
        packer_class = packers[config.algorithm]
    except KeyError:
        raise ValueError("No packer registered for {}".format(config.algorithm)) from None
    return packer_class(config)


__all__ = ["Packer", "SkylineInvariantError", "SkylinePacker", "get_packer", "packers"]
