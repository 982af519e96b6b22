from client.state import ErrorState, LoadingState, ResultState, ViewState

PLACEHOLDER = "Your concise summary will appear here..."
LOADING_MESSAGE = "Analyzing your content..."

def render(state: ViewState) -> str:
    """Text rendering of the form output. Depends on nothing but `state`."""
    if isinstance(state, LoadingState):
        return LOADING_MESSAGE
    if isinstance(state, ErrorState):
        return state.message
    if isinstance(state, ResultState):
        stats = state.result.stats
        # time_saved is minutes; the "s" label is kept from the web form
        return "\n".join([
            state.result.summary,
            "",
            f"{stats.reduction}% Content Reduced",
            f"{stats.time_saved}s Reading Time Saved",
        ])
    return PLACEHOLDER
