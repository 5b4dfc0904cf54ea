from finlit.models.user import User
from finlit.models.knowledge import FinancialContent
from finlit.models.question import Question
from finlit.models.progress import ProgressRecord

__all__ = [
    "User",
    "FinancialContent",
    "Question",
    "ProgressRecord",
]
