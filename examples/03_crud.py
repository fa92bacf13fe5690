"""
View, edit and delete a user
"""
import asyncio
from reqrespy import UsersClient, UserUpdate, is_failure


async def main():
    config = UsersClient.create_config(
        api_key="reqres-free-v1",  # reqres.in asks for an x-api-key header
        timeout=15,
        max_retries=2,
    )
    
    async with UsersClient("session", config=config) as client:
        user = await client.get_user(2)
        if is_failure(user):
            print(f"Cannot load user: {user}")
            return
        print(f"Loaded {user.full_name} <{user.email}>")
        
        result = await client.update_user(user.id, UserUpdate(first_name="Bob", last_name="X"))
        print("Updated" if result else f"Update failed: {result}")
        
        result = await client.delete_user(user.id)
        print("Deleted" if result else f"Delete failed: {result}")


if __name__ == "__main__":
    asyncio.run(main())
