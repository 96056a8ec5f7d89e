"""
Tests for database initialization.
"""

from sqlalchemy import inspect

from learnpersona.ingest.database import init_database, create_indexes
from learnpersona.ingest.schema import Base


class TestInitDatabase:

    def test_init_many_databases_in_one_process(self, tmp_path):
        for name in ("first", "second", "third", "fourth"):
            engine = init_database(f"sqlite:///{tmp_path / (name + '.db')}")

            indexes = {index["name"] for index in inspect(engine).get_indexes("users")}
            assert {"idx_users_department", "idx_users_persona"} <= indexes

    def test_reinit_same_database(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'again.db'}"

        init_database(url)
        engine = init_database(url, drop_existing=True)
        create_indexes(engine)

        assert set(inspect(engine).get_table_names()) == set(Base.metadata.tables)

    def test_index_declarations_not_duplicated(self, tmp_path):
        counts = {table.name: len(table.indexes) for table in Base.metadata.sorted_tables}

        init_database(f"sqlite:///{tmp_path / 'one.db'}")
        init_database(f"sqlite:///{tmp_path / 'two.db'}")

        assert counts == {table.name: len(table.indexes) for table in Base.metadata.sorted_tables}
        assert counts["user_progress"] == 2
