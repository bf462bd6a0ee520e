__version__ = "0.3.0"

app_name = "mdslides"
