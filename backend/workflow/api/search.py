"""
Search API — backs the dashboard header search box.
"""
from rest_framework.views import APIView
from rest_framework.response import Response

from workflow.services.search import search


class SearchView(APIView):
    def get(self, request):
        return Response(search(request.query_params.get("q", "")))
