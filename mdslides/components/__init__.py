"""Components of the generation pipeline, leaf-first.

- [`classifier`][mdslides.components.classifier] classifies single lines
- [`parser`][mdslides.components.parser] folds classified lines into slides
- [`layout`][mdslides.components.layout] decides how each slide is displayed
- [`renderer`][mdslides.components.renderer] turns slides into HTML
"""
