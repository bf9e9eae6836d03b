from datetime import date, datetime

from services.employee_codes import generate_employee_code
from services.leave_service import count_leave_days


def test_inclusive_span():
    assert count_leave_days(date(2024, 1, 1), date(2024, 1, 3)) == 3


def test_same_day_is_one():
    assert count_leave_days(date(2024, 5, 5), date(2024, 5, 5)) == 1


def test_partial_day_rounds_up():
    start = datetime(2024, 1, 1, 9, 0)
    end = datetime(2024, 1, 2, 15, 0)
    assert count_leave_days(start, end) == 3


def test_span_across_month_end():
    assert count_leave_days(date(2024, 1, 30), date(2024, 2, 2)) == 4


def test_employee_code_shape():
    code = generate_employee_code()
    assert code.startswith("EMP")
    assert code[3:-4].isdigit()
    assert len(code[-4:]) == 4


def test_employee_codes_unique_in_burst():
    codes = {generate_employee_code() for _ in range(200)}
    assert len(codes) == 200
