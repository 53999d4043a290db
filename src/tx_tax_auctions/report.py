import json


def format_line(record):
    return "%s,%s,%.2f,%.2f,%s" % (
        record.county.name,
        record.account_number or "",
        record.adjudged_value,
        record.minimum_bid,
        record.detail_url or "",
    )


def render(records):
    return [format_line(record) for record in records]


def render_jsonl(records):
    return [json.dumps(record.to_dict(), ensure_ascii=True) for record in records]


RENDERERS = {
    "csv": render,
    "jsonl": render_jsonl,
}


def write_report(lines, stream):
    for line in lines:
        stream.write(line + "\n")
