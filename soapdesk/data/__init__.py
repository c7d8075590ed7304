"""Static reference data: rating scale definitions, CPT codes and common diagnoses."""

from soapdesk.data.instruments import COMMON_DIAGNOSES, CPT_CODES, INSTRUMENTS, get_instrument

__all__ = ["COMMON_DIAGNOSES", "CPT_CODES", "INSTRUMENTS", "get_instrument"]
