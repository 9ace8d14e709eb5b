"""
Pydantic models for the hello echo endpoint.

The input carries a string and a list of numbers; the output nests the
numbers under ``b.c`` unchanged.  Integers stay integers.
"""

from typing import List, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt


# Strings and booleans are not numbers.
Number = Union[StrictInt, StrictFloat]


class HelloInput(BaseModel):
    x: str = Field(..., examples=["abc"])
    y: List[Number] = Field(..., examples=[[1, 2, 3]])


class HelloNumbers(BaseModel):
    c: List[Number]


class HelloOutput(BaseModel):
    a: str
    b: HelloNumbers


class HealthStatus(BaseModel):
    status: str
    timestamp: str
