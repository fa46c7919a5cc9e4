import json
import sys
import uuid

from faker import Faker


def fake_record(fake):
    return {
        "id": str(uuid.uuid4()),
        "name": fake.name(),
        "email": fake.email(),
        "city": fake.city(),
        "company": fake.company(),
    }


if __name__ == "__main__":
    fake = Faker()
    n = int(sys.argv[1])
    records = [fake_record(fake) for _ in range(n)]

    with open("example_records.jl", "w", encoding="utf8") as f:
        for record in records:
            f.write(json.dumps(record) + "\n")

        # overwrite every other record so the benchmark exercises updates too
        for record in records[::2]:
            record["company"] = fake.company()
            f.write(json.dumps(record) + "\n")

    with open("expected_state.jl", "w", encoding="utf8") as f:
        for record in records:
            f.write(json.dumps(record) + "\n")
