from .qpm_increase_10 import QPM_INCREASE_10
from .qpm_band import QPM_BAND
from .sw_index_expired import SW_INDEX_EXPIRED
from .cert_expiry import CERT_EXPIRY

__all__ = [
    "QPM_INCREASE_10",
    "QPM_BAND",
    "SW_INDEX_EXPIRED",
    "CERT_EXPIRY",
]
