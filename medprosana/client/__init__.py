from medprosana.client.api_client import ApiClient, ApiError
from medprosana.client.controller import ClinicClient
from medprosana.client.render import render_app, render_page
from medprosana.client.state import ClientState, Store

__all__ = ['ApiClient', 'ApiError', 'ClinicClient', 'ClientState', 'Store', 'render_app', 'render_page']
