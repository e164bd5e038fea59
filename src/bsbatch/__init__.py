# bsbatch: batch Black-Scholes pricing of European vanillas
# Public API

from .core import OptionParams, OptionBatch, CALL, PUT
from .normal import norm_cdf
from .black_scholes import d1_d2, euro_vanilla_call, euro_vanilla_put, price
from .dataset import load_options, generate_dataset, write_prices
from .batch import BatchResult, run_batch
from .exceptions import (
    BSBatchError, DatasetError, SourceUnavailableError, MalformedRecordError,
)

__all__ = [
    "OptionParams", "OptionBatch", "CALL", "PUT",
    "norm_cdf",
    "d1_d2", "euro_vanilla_call", "euro_vanilla_put", "price",
    "load_options", "generate_dataset", "write_prices",
    "BatchResult", "run_batch",
    "BSBatchError", "DatasetError", "SourceUnavailableError",
    "MalformedRecordError",
]

__version__ = "0.1.0"
