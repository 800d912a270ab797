import sys
import pytest
from pathlib import Path

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def default_loan():
    """页面默认参数：10000, 12个月, 年利率24%"""
    return {"principal": 10000, "term_months": 12, "annual_rate": 24}
