"""
Experience app

Purpose: turn a consultant's project records into experience metrics,
badges and chart data. Holds no models; records come from the projects
app or from the Harvest feed.
"""
