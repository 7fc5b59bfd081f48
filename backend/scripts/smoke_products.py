"""
Walk the create / read / rename / delete cycle against a running server.

    python scripts/smoke_products.py --base-url http://localhost:8080
"""
from __future__ import annotations

import argparse
import sys

import httpx


def check(label: str, resp: httpx.Response, expected_status: int, expected_body=None) -> bool:
    body = resp.json() if resp.content else None
    ok = resp.status_code == expected_status and (expected_body is None or body == expected_body)
    mark = "OK " if ok else "FAIL"
    print(f"[{mark}] {label}: {resp.status_code} {body}")
    return ok


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base-url", default="http://localhost:8080")
    parser.add_argument("--name", default="Widget")
    parser.add_argument("--new-name", default="Gadget")
    args = parser.parse_args()

    results = []
    with httpx.Client(base_url=args.base_url, timeout=5.0) as client:
        resp = client.post("/products", json={"name": args.name})
        results.append(check("create", resp, 201))
        if resp.status_code != 201:
            sys.exit(1)
        pid = resp.json()["id"]

        results.append(check("get", client.get(f"/products/{pid}"), 200, {"id": pid, "name": args.name}))
        results.append(check(
            "update",
            client.put("/products", json={"id": pid, "name": args.new_name}),
            200,
            {"id": pid, "name": args.new_name},
        ))
        results.append(check("get after update", client.get(f"/products/{pid}"), 200, {"id": pid, "name": args.new_name}))
        results.append(check("delete", client.delete(f"/products/{pid}"), 204))
        results.append(check("get after delete", client.get(f"/products/{pid}"), 404))

    passed = sum(results)
    print(f"\n{passed}/{len(results)} steps passed")
    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
