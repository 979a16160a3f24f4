"""Views for authentication flows (register, login, logout, current user)."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, inline_serializer  # type: ignore
from rest_framework import serializers, status  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import sessions
from .auth_serializers import LoginSerializer, RegisterSerializer
from .serializers import SessionUserSerializer


class RegisterView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    @extend_schema(
        description="Create an unassigned account and sign it in",
        request=RegisterSerializer,
        responses={201: SessionUserSerializer},
    )
    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        projection = sessions.start_session(request, user)
        return Response(SessionUserSerializer(projection).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    @extend_schema(
        description="Sign in with email and password",
        request=LoginSerializer,
        responses={200: SessionUserSerializer},
    )
    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        projection = sessions.login(request, **serializer.validated_data)
        return Response(SessionUserSerializer(projection).data, status=status.HTTP_200_OK)


class LogoutView(APIView):
    @extend_schema(
        request=None,
        responses={200: inline_serializer("LogoutResponse", {"detail": serializers.CharField()})},
    )
    def post(self, request):  # type: ignore
        sessions.logout(request)
        return Response({"detail": "Logged out successfully"}, status=status.HTTP_200_OK)


class CurrentUserView(APIView):
    """Signed-in caller as recorded in the session."""

    permission_classes = [AllowAny]

    @extend_schema(responses={200: SessionUserSerializer})
    def get(self, request):  # type: ignore
        projection = sessions.current_user(request)
        return Response(SessionUserSerializer(projection).data)
