from typing import Sequence

import plotly.graph_objects as go

from countrytable.records import ProjectedCountry


def population_chart(countries: Sequence[ProjectedCountry], title: str = "Population") -> go.Figure:
    # Bars follow the table's row order
    labels = [c.name if isinstance(c.name, str) else c.code for c in countries]

    fig = go.Figure(go.Bar(
        x=labels,
        y=[c.population for c in countries],
        customdata=[[c.code, c.capital or ""] for c in countries],
        hovertemplate="%{x} (%{customdata[0]})<br>Capital: %{customdata[1]}<br>Population: %{y:,}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Country",
        yaxis_title="Population",
        height=400,
        margin=dict(l=40, r=20, t=60, b=80),
    )
    return fig
