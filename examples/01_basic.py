"""
Basic usage - Login and list users
"""
import asyncio
from reqrespy import UsersClient, AuthRequired, RequestFailed


async def main():
    # Session mode (keeps the token in session.session)
    async with UsersClient("session") as client:
        
        if not await client.is_logged_in():
            await client.login("paste-your-oauth-access-token")
        
        users = await client.list_users(1)
        
        if isinstance(users, AuthRequired):
            print("Login required")
        elif isinstance(users, RequestFailed):
            print(f"Could not load users: {users.message}")
        else:
            print("Users on page 1:")
            for user in users:
                print(f"  {user}")


if __name__ == "__main__":
    asyncio.run(main())
