"""
CourseRepository against an in-memory SQLite database.
"""

from app.models.course import Course


def seed(repository, make_course):
    repository.save_all([
        make_course("C1", "Intro", 10, 40),
        make_course("C2", "Intermedio", 20, 100),
        make_course("C3", "Avanzado", 30, 200),
    ])


class TestFind:

    def test_find_all_returns_every_row(self, repository, make_course):
        seed(repository, make_course)

        codes = [c.code for c in repository.find_all()]

        assert sorted(codes) == ["C1", "C2", "C3"]

    def test_find_all_on_empty_table(self, repository):
        assert repository.find_all() == []

    def test_find_by_key(self, repository, make_course):
        seed(repository, make_course)

        found = repository.find_by_key("C2")

        assert found is not None
        assert found.name == "Intermedio"
        assert repository.find_by_key("nope") is None

    def test_find_by_name_prefix_is_case_sensitive(self, repository, make_course):
        seed(repository, make_course)

        assert [c.code for c in repository.find_by_name_prefix("In")] == ["C1", "C2"]
        assert [c.code for c in repository.find_by_name_prefix("Intr")] == ["C1"]
        assert repository.find_by_name_prefix("in") == []

    def test_find_by_price_range_is_inclusive(self, repository, make_course):
        seed(repository, make_course)

        assert [c.code for c in repository.find_by_price_range(40, 100)] == ["C1", "C2"]
        assert [c.code for c in repository.find_by_price_range(100, 100)] == ["C2"]
        assert repository.find_by_price_range(150, 50) == []


class TestWrite:

    def test_save_inserts(self, repository, make_course):
        saved = repository.save(make_course())

        assert saved.code == "C1"
        assert repository.exists_by_key("C1")

    def test_save_replaces_existing_code(self, repository, make_course, db_session):
        repository.save(make_course("C1", "Intro", 10, 100))

        repository.save(Course(code="C1", name="Otro", hours=5, price=0))
        db_session.expire_all()

        stored = repository.find_by_key("C1")
        assert (stored.name, stored.hours, stored.price) == ("Otro", 5, 0)
        assert len(repository.find_all()) == 1

    def test_save_all_returns_saved_rows(self, repository, make_course):
        saved = repository.save_all([make_course("A"), make_course("B")])

        assert [c.code for c in saved] == ["A", "B"]

    def test_save_all_with_empty_list(self, repository):
        assert repository.save_all([]) == []

    def test_delete_by_key(self, repository, make_course):
        repository.save(make_course())

        repository.delete_by_key("C1")

        assert not repository.exists_by_key("C1")
        assert repository.find_by_key("C1") is None

    def test_save_all_repeated_code_last_one_wins(self, repository, db_session):
        repository.save_all([
            Course(code="A", name="First", hours=1, price=10),
            Course(code="A", name="Second", hours=2, price=20),
        ])
        db_session.expire_all()

        stored = repository.find_all()
        assert len(stored) == 1
        assert (stored[0].name, stored[0].hours, stored[0].price) == ("Second", 2, 20)
