"""
FEE DISTRIBUTION ENGINE
Prices order items and distributes the fees across recipient funds.
"""

from .errors import FeeEngineError
from .models import BatchResult, FeeSchedule, Order, OrderFees
from .processor import FeeProcessor
from .schedule import load_schedule, load_schedule_file

__all__ = [
    'FeeProcessor',
    'FeeSchedule',
    'Order',
    'OrderFees',
    'BatchResult',
    'FeeEngineError',
    'load_schedule',
    'load_schedule_file',
]
