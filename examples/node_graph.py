"""Node editor graph stored in a GenerationalAllocator.

Edges hold GenIndex handles instead of object references. Deleting a node and
creating another in its slot leaves old edges pointing at a stale handle,
which the allocator reports as absent instead of silently resolving to the
new node.
"""

from dataclasses import dataclass, field

from gen_inds import GenerationalAllocator, GenIndex


@dataclass
class Node:
    label: str
    outputs: list[GenIndex] = field(default_factory=list)


def describe(nodes: GenerationalAllocator[Node], handle: GenIndex) -> str:
    node = nodes.get(handle)
    if node is None:
        return f"{handle} (dangling)"
    return f"{handle} {node.label}"


def print_graph(nodes: GenerationalAllocator[Node]) -> None:
    for handle, node in nodes.items():
        edges = [describe(nodes, h) for h in node.outputs]
        print(f"  {describe(nodes, handle)} -> {edges}")


def main() -> None:
    nodes = GenerationalAllocator[Node].with_capacity(8)

    source = nodes.allocate(Node("source"))
    blur = nodes.allocate(Node("blur"))
    output = nodes.allocate(Node("output"))
    nodes[source].outputs.append(blur)
    nodes[blur].outputs.append(output)

    print("Initial graph:")
    print_graph(nodes)

    # The replacement lands in blur's freed slot with the next generation
    nodes.deallocate(blur)
    sharpen = nodes.allocate(Node("sharpen"))
    print(f"Removed {blur}, allocated {sharpen} in the same slot")

    print("After replacement:")
    print_graph(nodes)


if __name__ == "__main__":
    main()
