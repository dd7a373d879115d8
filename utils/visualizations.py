"""
visualizations.py - Plotly charts for the public Streamlit pages.

This module provides reusable chart components:
- Season results donut (wins / draws / losses)
- Goals for vs. against bar
- Squad top-scorer bar chart
"""

from typing import Dict, List

import pandas as pd
import plotly.graph_objects as go
import plotly.express as px

from .constants import RESULT_COLORS, POSITION_LABELS


class PlotlyVisualizations:
    """Reusable Plotly chart components for Streamlit."""

    @staticmethod
    def season_results_donut(stats: Dict[str, int], height: int = 320) -> go.Figure:
        """
        Donut of wins, draws and losses from a team's season stats.

        Args:
            stats: Team stats dict (wire keys: wins, draws, losses, ...)
            height: Chart height in pixels
        """
        labels = ['Wins', 'Draws', 'Losses']
        keys = ['wins', 'draws', 'losses']
        values = [int(stats.get(key, 0) or 0) for key in keys]

        fig = go.Figure(go.Pie(
            labels=labels,
            values=values,
            hole=0.55,
            marker=dict(colors=[RESULT_COLORS[key] for key in keys]),
            sort=False,
        ))
        fig.update_layout(
            height=height,
            margin=dict(l=10, r=10, t=30, b=10),
            showlegend=True,
            annotations=[dict(text=f"{int(stats.get('points', 0) or 0)} pts", showarrow=False, font_size=18)],
        )
        return fig

    @staticmethod
    def goals_bar(stats: Dict[str, int], height: int = 260) -> go.Figure:
        """Goals scored vs. conceded."""
        fig = go.Figure(go.Bar(
            x=['Scored', 'Conceded'],
            y=[int(stats.get('goalsFor', 0) or 0), int(stats.get('goalsAgainst', 0) or 0)],
            marker_color=[RESULT_COLORS['wins'], RESULT_COLORS['losses']],
        ))
        fig.update_layout(height=height, margin=dict(l=10, r=10, t=30, b=10), yaxis_title='Goals')
        return fig

    @staticmethod
    def top_scorers_bar(players: List[Dict], top_n: int = 10, height: int = 400) -> go.Figure:
        """
        Horizontal bar of the squad's top scorers.

        Args:
            players: Rows with 'Name', 'Position' and 'Goals' keys
            top_n: Number of players to show
        """
        df = pd.DataFrame(players, columns=['Name', 'Position', 'Goals'])
        df = df[df['Goals'] > 0].sort_values('Goals', ascending=False).head(top_n)
        df['Position'] = df['Position'].map(lambda p: POSITION_LABELS.get(p, p))

        fig = px.bar(
            df.sort_values('Goals'),
            x='Goals',
            y='Name',
            color='Position',
            orientation='h',
            height=height,
        )
        fig.update_layout(margin=dict(l=10, r=10, t=30, b=10), yaxis_title=None)
        return fig
