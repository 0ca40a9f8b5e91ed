from typing import Dict, List, TextIO

import click

from core.dijkstra import ShortestPaths
from importer.edge_list_importer import graph_from_edge_list
from utilities.queues import QueueType
from utilities.status_logger import StatusLogger, TimedStatusLogger

QUEUE_TYPES: Dict[str, QueueType] = {queue_type.name.lower(): queue_type for queue_type in QueueType}

NO_PATH = "None"


def format_path(path: List[str]) -> str:
    return "[" + ", ".join(str(node) for node in path) + "]"


def compute_shortest_paths(edges: TextIO, source: str, queue_name: str, suppress_log: bool) -> ShortestPaths[str]:
    with StatusLogger("Reading edge list...", suppress_log=suppress_log):
        try:
            graph = graph_from_edge_list(edges)
        except ValueError as e:
            raise click.ClickException(str(e))

    if source not in graph:
        raise click.BadParameter(f"{source} is not a node of the graph.", param_hint="SOURCE")

    with TimedStatusLogger(
            f"Running Dijkstra from {source} on {len(graph)} nodes...",
            f"Computed shortest paths from {source} on {len(graph)} nodes.",
            suppress_log=suppress_log
    ):
        return ShortestPaths(graph, source, QUEUE_TYPES[queue_name])


edges_option = click.option(
    "--edges", type=click.File("r"), default="-", show_default=True,
    help="File with whitespace separated triples 'from_node to_node weight'. Reads stdin by default."
)
queue_option = click.option(
    "--queue", "queue_name", type=click.Choice(list(QUEUE_TYPES.keys())), default="binary_heap",
    show_default=True, help="Priority queue used by Dijkstra's algorithm."
)
suppress_log_option = click.option(
    "--suppress-log", is_flag=True, default=False, help="Do not write status messages to stderr."
)


@click.group()
def main():
    pass


@click.command(name='shortest_path',
               help="Print the distance and a shortest path from SOURCE to DESTINATION in the undirected graph "
                    "given by the edge list, or None if DESTINATION cannot be reached.")
@click.argument("source")
@click.argument("destination")
@edges_option
@queue_option
@suppress_log_option
def shortest_path(source: str, destination: str, edges: TextIO, queue_name: str, suppress_log: bool):
    paths = compute_shortest_paths(edges, source, queue_name, suppress_log)
    if destination not in paths.distances():
        raise click.BadParameter(f"{destination} is not a node of the graph.", param_hint="DESTINATION")

    if paths.has_path_to(destination):
        click.echo(f"{paths.distance_to(destination)} {format_path(paths.path_to(destination))}")
    else:
        click.echo(NO_PATH)


@click.command(name='distances',
               help="Print the distance from SOURCE to every node of the undirected graph given by the edge list.")
@click.argument("source")
@edges_option
@queue_option
@suppress_log_option
def distances(source: str, edges: TextIO, queue_name: str, suppress_log: bool):
    paths = compute_shortest_paths(edges, source, queue_name, suppress_log)
    for node, distance in sorted(paths.distances().items(), key=lambda node_distance: node_distance[1]):
        click.echo(f"{node} {distance}")


main.add_command(shortest_path)
main.add_command(distances)

if __name__ == '__main__':
    main()
