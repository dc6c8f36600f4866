from sqlalchemy import Column, Integer, BigInteger, String, Float, LargeBinary, insert, select
from sqlalchemy.orm import declarative_base
from sqlalchemy_rowselect import Database
import argparse
import time
import random
from faker import Faker


random.seed(42)
Base = declarative_base()
fake = Faker()
CATEGORIES = list("ABCDEFGHIJK")
COLUMNS = ["id", "name", "category", "price", "counter", "payload"]

class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String)
    category = Column(String)
    price = Column(Float)
    counter = Column(BigInteger)
    payload = Column(LargeBinary)

def generate_items(n):
    for _ in range(n):
        yield dict(
            name=fake.name(),
            category=random.choice(CATEGORIES),
            price=random.choice([None, round(random.uniform(5, 500), 2)]),
            counter=random.randint(0, 2 ** 40),
            payload=fake.binary(length=16),
        )

def inserts(database, count):
    insert_start = time.time()
    database.execute(insert(Item.__table__), list(generate_items(count)))
    insert_duration = time.time() - insert_start
    print(f"Inserted {count} items in {insert_duration:.2f} seconds.")
    return insert_duration

def reads(database, count, fetch_type):
    query_start = time.time()
    for _ in range(count):
        category = random.choice(CATEGORIES)

        if fetch_type == "sqlalchemy":
            stmt = select(*[Item.__table__.c[name] for name in COLUMNS]).where(Item.category == category)
            database.connection.execute(stmt).all()
            continue

        with database.prepare_row_select(COLUMNS, ["items"]) as row_select:
            row_select.where(f"category = '{category}'")

            if fetch_type == "next_row":
                for row in row_select:
                    pass
            elif fetch_type == "next_value":
                while row_select.next_value() is not None:
                    pass
            else:
                row_select.all_rows()

    query_duration = time.time() - query_start
    print(f"Executed {count} select queries ({fetch_type}) in {query_duration:.2f} seconds.")
    return query_duration

def run_benchmark(count=100_000, queries=50):
    print(f"Running benchmark: count={count}, queries={queries}")

    with Database() as database:
        Base.metadata.create_all(database.connection)
        database.connection.commit()

        elapsed = inserts(database, count)
        for fetch_type in ("sqlalchemy", "all_rows", "next_row", "next_value"):
            elapsed += reads(database, queries, fetch_type)

    print(f"Total runtime: {elapsed:.2f} seconds.")



if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--count", type=int, default=10_000)
    parser.add_argument("--queries", type=int, default=50)
    args = parser.parse_args()
    run_benchmark(args.count, args.queries)
