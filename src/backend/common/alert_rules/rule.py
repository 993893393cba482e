from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Type

from pydantic import BaseModel

from common.scorecard.models import SupplierRecord

from .context import AlertContext
from .models import Notification


class Rule(ABC):
    rule_id: str
    rule_title: str
    evaluation_order: int
    config_model: Type[BaseModel]

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    @abstractmethod
    def evaluate(self, record: SupplierRecord, ctx: AlertContext) -> List[Notification]:  # pragma: no cover
        raise NotImplementedError
