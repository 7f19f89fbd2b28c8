import pytest

from arborlab.student import Student, load_students, main, parse_student


def test_parse_student_fields():
    student = parse_student("86,Ada,Byron,ada@example.com,Mathematics\n")
    assert student.student_id == 86
    assert student.first == "Ada"
    assert student.last == "Byron"
    assert student.email == "ada@example.com"
    assert student.major == "Mathematics"


def test_parse_student_missing_fields_and_bad_id():
    student = parse_student("abc,Only")
    assert student.student_id == 0
    assert student.first == "Only"
    assert student.last == ""
    assert student.major == ""


def test_comparison_uses_id_only():
    a = Student(5, "A", "B", "a@example.com", "X")
    b = Student(5, "C", "D", "c@example.com", "Y")
    c = Student(7)
    assert a == b
    assert a < c
    assert c > b
    assert a <= b and a >= b


def test_str_format():
    student = Student(3, "Ada", "Byron", "ada@example.com", "Math")
    assert str(student) == "3: Byron, Ada. ada@example.com, Math. Math\n"


@pytest.fixture
def roster(tmp_path):
    path = tmp_path / "students.csv"
    rows = [
        "86,Ada,Byron,ada@example.com,Mathematics",
        "12,Alan,Turing,alan@example.com,Computing",
        "40,Grace,Hopper,grace@example.com,Navy",
        "3,Emmy,Noether,emmy@example.com,Algebra",
        "",
    ]
    path.write_text("\n".join(rows), encoding="utf-8")
    return path


def test_load_students_orders_by_id(roster):
    tree = load_students(str(roster))
    ids = [student.student_id for student in tree.traverse()]
    assert ids == [3, 12, 40, 86]
    assert Student(40) in tree
    assert Student(10) not in tree


def test_main_reports_searches(roster, capsys):
    assert main([str(roster)]) == 0
    out = capsys.readouterr().out
    assert "...key found!" in out
    assert "...Node not found!" in out
    assert "----------" in out


def test_main_wrong_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Incorrect Number of Inputs\n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.csv"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().out == f"Invalid File: {missing}\n"