import argparse
import json
import sys
from typing import Dict, List, Optional

import requests


def read_lore(path: str) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class LoreSeeder:
    def __init__(self, base_url: str, timeout: float, dry_run: bool):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.dry_run = dry_run
        self.created = 0

    def _send(self, method: str, path: str, payload: dict) -> Optional[str]:
        if self.dry_run:
            self.created += 1
            return f"dry-run:{path}:{self.created}"
        try:
            r = requests.request(method, self.base_url + path, json=payload, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            print(f"Failed to {method} {path}: {payload} ({e})", file=sys.stderr)
            return None
        self.created += 1
        return r.json()["data"]["id"]

    def create_all(self, path: str, documents: List[dict], key: str) -> Dict[str, str]:
        ids = {}
        for payload in documents:
            document_id = self._send("POST", path, payload)
            if document_id:
                ids[payload[key]] = document_id
        return ids

    def seed(self, lore: dict) -> None:
        species_ids = self.create_all("/api/species", lore.get("species", []), "name")
        self.create_all("/api/pois", lore.get("pois", []), "name")

        books = {book["title"]: dict(book, characters=[]) for book in lore.get("books", [])}
        book_ids = self.create_all("/api/books", list(books.values()), "title")

        for character in lore.get("characters", []):
            species_id = species_ids.get(character["species"])
            if species_id is None:
                print(f"Unknown species for {character['name']}: {character['species']}", file=sys.stderr)
                continue
            appears_in = [title for title in character.get("appears_in", []) if title in book_ids]
            payload = dict(character, species=species_id, appears_in=[book_ids[title] for title in appears_in])
            character_id = self._send("POST", "/api/characters", payload)
            if character_id:
                for title in appears_in:
                    books[title]["characters"].append(character_id)

        for title, book_id in book_ids.items():
            if books[title]["characters"]:
                self._send("PUT", f"/api/books/{book_id}", books[title])


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--data_path", type=str, default="scripts/data/sample_lore.json")
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        lore = read_lore(args.data_path)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Failed to read lore: {e}", file=sys.stderr)
        sys.exit(1)

    seeder = LoreSeeder(args.base_url, args.timeout, args.dry_run)
    seeder.seed(lore)
    print(f"Sent {seeder.created} requests")


if __name__ == "__main__":
    main()
