"""nnumber — convert between US ICAO addresses and N-number tail registrations."""

from .codec import Conversion, icao_to_tail, tail_to_icao

__version__ = "0.1.0"

__all__ = ["Conversion", "icao_to_tail", "tail_to_icao", "__version__"]
