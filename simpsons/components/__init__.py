"""Text widgets: bar charts, heatmaps, sparklines, filter, text input and project picker."""