from pathlib import Path

HEADER = "Airline,Airline ID,Source airport,Source airport ID,Destination airport,Destination airport ID,Codeshare,Stops,Equipment"

SAMPLE_PAIRS = [("AAA", "BBB"), ("AAA", "CCC"), ("BBB", "AAA")]


def route_line(source, destination, airline="SA"):
    """Render one OpenFlights-style route line for the given endpoints."""
    return f"{airline},1,{source},10,{destination},20,,0,A320"


def write_route_file(directory: Path, pairs, name="routes.csv", header=HEADER, trailing_newline=True):
    """Write a route file with a header line and one route per (source, destination) pair."""
    lines = [header] + [route_line(source, destination) for source, destination in pairs]
    text = "\n".join(lines)
    if trailing_newline:
        text += "\n"
    path = Path(directory) / name
    path.write_text(text, encoding="utf-8")
    return path
