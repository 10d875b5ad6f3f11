#!/usr/bin/env python
# scripts/index_report.py
import argparse, json
from collections import Counter

def main():
    ap = argparse.ArgumentParser(description="Quick look at a written section index")
    ap.add_argument("index", nargs="?", default="wildfly-doc-index.json")
    ap.add_argument("--top", type=int, default=10)
    args = ap.parse_args()

    with open(args.index, "r", encoding="utf-8") as fh:
        entries = json.load(fh)

    pages = Counter(e["url"].split("#", 1)[0] for e in entries)
    sizes = [len(e["content"]) for e in entries]
    print("entries         :", len(entries))
    print("pages           :", len(pages))
    print("empty sections  :", sum(1 for s in sizes if s == 0))
    print("avg content chars:", int(sum(sizes) / len(sizes)) if sizes else 0)

    print(f"\nTop {args.top} largest sections:")
    for e in sorted(entries, key=lambda e: len(e["content"]), reverse=True)[:args.top]:
        print(f"  {len(e['content']):>7}  {e['url']}")

    dupes = Counter(e["title"] for e in entries)
    print(f"\nMost repeated titles (sample {args.top}):")
    for t, c in dupes.most_common(args.top):
        if c > 1:
            print(f"  {c:>4}  {t}")

if __name__ == "__main__":
    main()
