"""Main exhibition routes — current, registration, edit, images, recent, rankings.

Tests:
    - No exhibition yet → GET gradation/current answers 409 with a message
    - Registration archives min(50, art count) artworks, ranked by like count
    - PUT modify/{id} re-fetches CURRENT: edits to older seasons are invisible there
    - Deleting a missing image id is not an error
    - top-liked-art answers 404 exactly when there are no artworks
"""

from sqlalchemy import func, select

from gradation.models.gradation_exhibition import GradationExhibition
from gradation.models.gradation_exhibition_image import GradationExhibitionImage
from gradation.models.past_exhibition import PastExhibition
from tests.services.payloads import gradation_payload

BASE = "/exhibitions/api"


async def _register(client, title="Spring Graduation Show", **overrides) -> dict:
    res = await client.post(
        f"{BASE}/gradation/registration",
        json=gradation_payload(title, **overrides),
    )
    assert res.status_code == 200
    return res.json()["gradation"]


async def _past_art_ids(test_db, exhibition_id: int) -> list[int]:
    result = await test_db.execute(
        select(PastExhibition.art_id)
        .where(PastExhibition.gradation_exhibition_id == exhibition_id)
        .order_by(PastExhibition.id),
    )
    return list(result.scalars().all())


# --- current ------------------------------------------------------------------

async def test_current_without_exhibition_returns_409(client):
    res = await client.get(f"{BASE}/gradation/current")
    assert res.status_code == 409
    assert res.json() == {"message": "Failed to load the exhibition."}


async def test_current_returns_newest_exhibition_with_images(client):
    await _register(client, "First Season", date="2024-05-01")
    second = await _register(client, "Second Season", date="2025-05-01")
    await client.post(f"{BASE}/gradation/image", json={
        "gradationExhibitionId": second["id"],
        "imgName": "hall.png",
        "imgPath": "assets/images/gradation",
    })

    res = await client.get(f"{BASE}/gradation/current")

    assert res.status_code == 200
    body = res.json()
    assert body["gradation"]["title"] == "Second Season"
    assert [i["imgName"] for i in body["images"]] == ["hall.png"]
    assert body["message"]


# --- registration & archive snapshot -------------------------------------------

async def test_registration_echoes_stored_exhibition(client):
    gradation = await _register(client)
    assert gradation["id"] >= 1
    assert gradation["title"] == "Spring Graduation Show"
    assert gradation["date"] == "2025-06-01"
    assert "createdAt" in gradation


async def test_registration_archives_all_arts_when_fewer_than_fifty(
    client, seed_arts, test_db,
):
    art_ids = await seed_arts([1, 5, 3])

    gradation = await _register(client)

    archived = await _past_art_ids(test_db, gradation["id"])
    assert archived == [art_ids[1], art_ids[2], art_ids[0]]


async def test_registration_archives_exactly_fifty_top_liked(
    client, seed_arts, test_db,
):
    like_counts = [i % 9 for i in range(55)]
    art_ids = await seed_arts(like_counts)

    gradation = await _register(client)

    archived = await _past_art_ids(test_db, gradation["id"])
    expected = [
        art_id for art_id, _ in sorted(
            zip(art_ids, like_counts), key=lambda pair: (-pair[1], pair[0]),
        )
    ][:50]
    assert len(archived) == 50
    assert archived == expected


async def test_registration_without_arts_archives_nothing(client, test_db):
    gradation = await _register(client)
    assert await _past_art_ids(test_db, gradation["id"]) == []


async def test_registration_rejects_missing_title(client):
    payload = gradation_payload()
    del payload["title"]
    res = await client.post(f"{BASE}/gradation/registration", json=payload)
    assert res.status_code == 400


async def test_registration_rolls_back_when_snapshot_fails(
    client, seed_arts, test_db, monkeypatch,
):
    await seed_arts([2, 1])

    async def _boom(self, exhibition_id, art_ids):
        raise RuntimeError("archive unavailable")

    monkeypatch.setattr(
        "gradation.repositories.exhibition_repository.ExhibitionRepository.save_past_entries",
        _boom,
    )

    res = await client.post(
        f"{BASE}/gradation/registration", json=gradation_payload(),
    )

    assert res.status_code == 500
    assert res.json()["message"] == "Server error: archive unavailable"
    count = await test_db.execute(select(func.count(GradationExhibition.id)))
    assert count.scalar_one() == 0


# --- edit ---------------------------------------------------------------------

async def test_edit_current_exhibition_is_reflected(client):
    current = await _register(client)

    res = await client.put(
        f"{BASE}/modify/{current['id']}",
        json=gradation_payload("Renamed Show", fee=None),
    )

    assert res.status_code == 200
    assert res.json()["id"] == current["id"]
    assert res.json()["title"] == "Renamed Show"


async def test_edit_overwrites_absent_optional_fields(client):
    current = await _register(client)
    payload = gradation_payload()
    del payload["tel"]
    del payload["address"]

    res = await client.put(f"{BASE}/modify/{current['id']}", json=payload)

    assert res.json()["tel"] is None
    assert res.json()["address"] is None


async def test_edit_older_exhibition_returns_unchanged_current(client):
    older = await _register(client, "Older Show")
    newest = await _register(client, "Newest Show")

    res = await client.put(
        f"{BASE}/modify/{older['id']}", json=gradation_payload("Older Renamed"),
    )

    assert res.status_code == 200
    assert res.json()["id"] == newest["id"]
    assert res.json()["title"] == "Newest Show"


async def test_edit_without_any_exhibition_returns_empty_object(client):
    res = await client.put(f"{BASE}/modify/42", json=gradation_payload())
    assert res.status_code == 200
    assert res.json() == {}


# --- images -------------------------------------------------------------------

async def test_delete_image_removes_it(client, test_db):
    gradation = await _register(client)
    created = await client.post(f"{BASE}/gradation/image", json={
        "gradationExhibitionId": gradation["id"],
        "imgName": "hall.png",
        "imgPath": "assets/images/gradation",
    })
    image_id = created.json()["image"]["id"]

    res = await client.delete(f"{BASE}/gradation/image/{image_id}")

    assert res.status_code == 200
    result = await test_db.execute(
        select(func.count(GradationExhibitionImage.id)),
    )
    assert result.scalar_one() == 0


async def test_delete_missing_image_is_not_an_error(client):
    res = await client.delete(f"{BASE}/gradation/image/999")
    assert res.status_code == 200


# --- recent -------------------------------------------------------------------

async def test_recent_returns_three_newest_with_year_prefix(client):
    for year in (2021, 2022, 2023, 2024):
        await _register(client, f"Show {year}", date=f"{year}-06-01")

    res = await client.get(f"{BASE}/gradation/recent")

    assert res.status_code == 200
    titles = [e["title"] for e in res.json()["exhibitions"]]
    assert titles == ["2024 Show 2024", "2023 Show 2023", "2022 Show 2022"]


async def test_recent_with_no_exhibitions_is_empty(client):
    res = await client.get(f"{BASE}/gradation/recent")
    assert res.status_code == 200
    assert res.json()["exhibitions"] == []


# --- top liked ----------------------------------------------------------------

async def test_top_liked_empty_returns_404(client):
    res = await client.get(f"{BASE}/gradation/top-liked-art")
    assert res.status_code == 404


async def test_top_liked_ranks_by_like_count(client, seed_arts):
    art_ids = await seed_arts([0, 4, 2])

    res = await client.get(f"{BASE}/gradation/top-liked-art")

    assert res.status_code == 200
    body = res.json()
    assert [a["id"] for a in body] == [art_ids[1], art_ids[2], art_ids[0]]
    assert [a["likeCount"] for a in body] == [4, 2, 0]


async def test_top_liked_failure_returns_500_not_404(client, monkeypatch):
    async def _boom(self, limit):
        raise RuntimeError("ranking offline")

    monkeypatch.setattr(
        "gradation.repositories.exhibition_repository.ExhibitionRepository.find_top_liked_arts",
        _boom,
    )

    res = await client.get(f"{BASE}/gradation/top-liked-art")

    assert res.status_code == 500
    assert res.json()["message"] == "Server error: ranking offline"
