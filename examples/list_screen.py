"""
Admin list screen pagination examples.

The first example pages an in-memory list; the second pages a DynamoDB
partition (run it against a real table or LocalStack).
"""

import boto3
from pydantic import BaseModel

from pagewindow import DynamoTableQuery, ListQuery, PageNavigator, SimplePager, paginate


class Movie(BaseModel):
    year: int
    title: str
    rating: float


# --- In memory ---

rows = [{"id": i, "title": f"Movie {i}"} for i in range(1, 48)]

pager = SimplePager(max_per_page=10, threshold=3, query=ListQuery(rows))
pager.page = 2
pager.init()

nav = PageNavigator(pager)
print("Rows:", [row["id"] for row in pager.get_current_page_results()])
print("Links:", nav.links(), "next:", nav.next_page, "previous:", nav.previous_page)
print(f"Showing {nav.first_index}-{nav.last_index} of at least {pager.count_results()}")

# --- DynamoDB ---

client = boto3.client("dynamodb")
query = DynamoTableQuery(client, "Movies", model_cls=Movie, pk_name="year", pk_val=2013)

window = paginate(query, page=1, max_per_page=5, threshold=2)
for movie in window.items:
    print(f"{movie.title} ({movie.rating})")
print("More pages:", window.has_more, "links:", window.links)
