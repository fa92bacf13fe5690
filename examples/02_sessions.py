"""
Credential storage - where the token lives
"""
import asyncio
from reqrespy import UsersClient, JSONFileSession, MemorySession, EnvTokenProvider


async def main():
    # Method 1: SQLite session file (default for a name)
    client = UsersClient("my_account")
    await client.login("token-a")
    print(f"Stored in {client.session_file}")
    await client.close()
    
    # Next run: token is still there
    async with UsersClient("my_account") as client:
        print(f"Logged in: {await client.is_logged_in()}")
    
    # Method 2: JSON file
    async with UsersClient(JSONFileSession("my_account")) as client:
        await client.login_with(EnvTokenProvider())  # REQRES_ACCESS_TOKEN
    
    # Method 3: memory only (nothing written to disk)
    async with UsersClient(MemorySession()) as client:
        await client.login("throwaway")
    
    # Logout and forget the token
    async with UsersClient("my_account") as client:
        await client.logout()


if __name__ == "__main__":
    asyncio.run(main())
