"""
User API — the local mirror of identity-provider accounts.
"""
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from workflow.serializers import UserStoreSerializer, UserSerializer
from workflow.services.users import store_user, remove_user, get_user, list_users


class UserListStoreView(APIView):
    def get(self, request):
        return Response(UserSerializer(list_users(), many=True).data)

    def post(self, request):
        """Insert or refresh a user by provider id."""
        serializer = UserStoreSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = store_user(**serializer.validated_data)
        return Response(UserSerializer(user).data)


class UserDetailView(APIView):
    def get(self, request, user_id):
        user = get_user(user_id)
        if not user:
            return Response({"detail": "User not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(UserSerializer(user).data)

    def delete(self, request, user_id):
        remove_user(user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
