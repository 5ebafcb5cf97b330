"""
Graph construction for the itinerary advisor.

Builds and compiles the LangGraph workflow for one advisory round.
"""

from langgraph.graph import StateGraph, END

from itinerary_advisor.advisor.schemas import AdvisorState
from itinerary_advisor.advisor.nodes.prompt import prompt_node
from itinerary_advisor.advisor.nodes.generation import generation_node
from itinerary_advisor.advisor.nodes.parsing import parsing_node
from itinerary_advisor.advisor.nodes.reconciliation import reconciliation_node


def create_advisor_graph():
    """
    Create and compile the LangGraph workflow for advice.

    The graph structure is:
        Entry -> prompt -> generation -> parsing -> reconciliation -> END

    Errors raised by a node (GenerationError, ParseError) end the run and
    propagate to the caller of invoke/ainvoke.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    graph = StateGraph(AdvisorState)

    # Add nodes
    graph.add_node("prompt", prompt_node)
    graph.add_node("generation", generation_node)
    graph.add_node("parsing", parsing_node)
    graph.add_node("reconciliation", reconciliation_node)

    # Set entry point and edges
    graph.set_entry_point("prompt")
    graph.add_edge("prompt", "generation")
    graph.add_edge("generation", "parsing")
    graph.add_edge("parsing", "reconciliation")
    graph.add_edge("reconciliation", END)

    app = graph.compile()

    return app
