"""The exceptions module implements custom exceptions for the singleton
 holders.

Classes:
    ConstructionError - the payload factory failed while creating the shared
     instance.
"""


class ConstructionError(Exception):
    """Construction error exception"""
