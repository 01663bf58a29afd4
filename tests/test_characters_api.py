import uuid

import pytest
from fastapi import status

from .conftest import BaseIntegrationTest
from .factories import lore_factory


class TestCharacterAPI(BaseIntegrationTest):
    """Integration tests for Character API endpoints"""

    async def _create_species(self, client, name):
        response = await client.post("/api/species", json=lore_factory.create_species_data(name=name))
        return response.json()["data"]["id"]

    async def _create_character(self, client, **kwargs):
        response = await client.post("/api/characters", json=lore_factory.create_character_data(**kwargs))
        assert response.status_code == status.HTTP_201_CREATED
        return response.json()["data"]

    @pytest.mark.asyncio
    async def test_create_character(self, client):
        species_id = await self._create_species(client, "Human")

        response = await client.post("/api/characters", json=lore_factory.create_character_data(species=species_id))

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["message"] == "Character created successfully"
        assert body["data"]["species"] == species_id
        assert body["data"]["appears_in"] == []

    @pytest.mark.asyncio
    async def test_create_character_with_invalid_species_id(self, client):
        response = await client.post("/api/characters", json=lore_factory.create_character_data(species="human"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"].startswith("Validation Error: species")

    @pytest.mark.asyncio
    async def test_update_and_delete_character(self, client):
        created = await self._create_character(client)

        updated = await client.put(
            f"/api/characters/{created['id']}", json=lore_factory.create_character_data(name="Szeth", age=35)
        )
        deleted = await client.delete(f"/api/characters/{created['id']}")

        assert updated.json()["message"] == "Character updated successfully"
        assert updated.json()["data"]["name"] == "Szeth"
        assert deleted.json() == {"success": True, "message": "Character deleted successfully"}

    @pytest.mark.asyncio
    async def test_get_character_invalid_id(self, client):
        response = await client.get("/api/characters/123")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"success": False, "error": "Invalid character ID"}

    @pytest.mark.asyncio
    async def test_filter_by_species_and_age(self, client):
        human = await self._create_species(client, "Human")
        singer = await self._create_species(client, "Singer")
        spren = await self._create_species(client, "Spren")
        await self._create_character(client, name="Kaladin", age=20, species=human)
        await self._create_character(client, name="Venli", age=30, species=singer)
        await self._create_character(client, name="Syl", age=1000, species=spren)

        page = (
            await client.get(
                "/api/characters", params={"species": f"{human}, {singer}", "age_min": "18", "age_max": "25"}
            )
        ).json()["data"]

        assert [character["name"] for character in page["data"]] == ["Kaladin"]

    @pytest.mark.asyncio
    async def test_filter_by_repeated_species_parameter(self, client):
        human = await self._create_species(client, "Human")
        singer = await self._create_species(client, "Singer")
        await self._create_character(client, name="Kaladin", species=human)
        await self._create_character(client, name="Venli", species=singer)

        response = await client.get(f"/api/characters?species={human}&species={singer}")

        assert response.json()["data"]["total"] == 2

    @pytest.mark.asyncio
    async def test_filter_by_malformed_species(self, client):
        response = await client.get("/api/characters", params={"species": "human"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Invalid species ID"

    @pytest.mark.asyncio
    async def test_species_stats(self, client):
        human = await self._create_species(client, "Human")
        await self._create_character(client, name="Kaladin", species=human)
        await self._create_character(client, name="Shallan", species=human)
        await self._create_character(client, name="Nightblood", species=str(uuid.uuid4()))

        response = await client.get("/api/characters/stats/species")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "data": [{"species": "Human", "count": 2}, {"species": "Unknown", "count": 1}],
        }

    @pytest.mark.asyncio
    async def test_species_stats_empty(self, client):
        response = await client.get("/api/characters/stats/species")

        assert response.json() == {"success": True, "data": []}

    @pytest.mark.asyncio
    async def test_book_stats(self, client):
        character_ids = [str(uuid.uuid4()), str(uuid.uuid4())]
        book = (
            await client.post("/api/books", json=lore_factory.create_book_data(characters=character_ids))
        ).json()["data"]
        character = await self._create_character(client, name="Dalinar", appears_in=[book["id"], str(uuid.uuid4())])

        response = await client.get(f"/api/characters/{character['id']}/book-stats")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] == {
            "characterId": character["id"],
            "characterName": "Dalinar",
            "totalBooks": 1,
            "books": [{"bookId": book["id"], "title": book["title"], "characterCount": 2}],
        }

    @pytest.mark.asyncio
    async def test_book_stats_character_not_found(self, client):
        response = await client.get(f"/api/characters/{uuid.uuid4()}/book-stats")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"success": False, "error": "Character not found"}


class TestPoiAndSpeciesAPI(BaseIntegrationTest):
    """Integration tests for points of interest and species endpoints"""

    @pytest.mark.asyncio
    async def test_poi_lifecycle(self, client):
        created = await client.post("/api/pois", json=lore_factory.create_poi_data())
        poi_id = created.json()["data"]["id"]

        updated = await client.put(f"/api/pois/{poi_id}", json={"name": "Kholinar"})
        deleted = await client.delete(f"/api/pois/{poi_id}")
        missing = await client.get(f"/api/pois/{poi_id}")

        assert created.status_code == status.HTTP_201_CREATED
        assert created.json()["message"] == "Point of interest created successfully"
        assert updated.json()["message"] == "Point of interest updated successfully"
        assert updated.json()["data"]["name"] == "Kholinar"
        assert "type" not in updated.json()["data"]
        assert deleted.json()["message"] == "Point of interest deleted successfully"
        assert missing.json() == {"success": False, "error": "Point of interest not found"}

    @pytest.mark.asyncio
    async def test_poi_filters(self, client):
        await client.post("/api/pois", json=lore_factory.create_poi_data(name="Urithiru", type="city"))
        await client.post("/api/pois", json=lore_factory.create_poi_data(name="Shattered Plains", type="region"))

        page = (await client.get("/api/pois", params={"type": "CIT"})).json()["data"]

        assert [poi["name"] for poi in page["data"]] == ["Urithiru"]

    @pytest.mark.asyncio
    async def test_species_lifecycle(self, client):
        created = await client.post("/api/species", json=lore_factory.create_species_data(name="Listener"))
        species_id = created.json()["data"]["id"]

        fetched = await client.get(f"/api/species/{species_id}")
        listed = await client.get("/api/species", params={"name": "list"})
        deleted = await client.delete(f"/api/species/{species_id}")

        assert created.json()["message"] == "Species created successfully"
        assert fetched.json()["data"]["name"] == "Listener"
        assert listed.json()["data"]["total"] == 1
        assert deleted.json() == {"success": True, "message": "Species deleted successfully"}

    @pytest.mark.asyncio
    async def test_species_requires_description(self, client):
        response = await client.post("/api/species", json={"name": "Listener"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"success": False, "error": "Validation Error: desc: Field required"}

    @pytest.mark.asyncio
    async def test_species_invalid_id(self, client):
        response = await client.get("/api/species/abc")

        assert response.json() == {"success": False, "error": "Invalid species ID"}
